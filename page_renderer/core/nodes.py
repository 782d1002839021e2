"""
OutputNode — unité de sortie du renderer.

Un nœud = un tag, un payload optionnel (balisage brut OU texte simple)
et des enfants ordonnés (uniquement pour les listes).
"""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .markup import RawMarkup

FALLBACK_TEXT = "Block is not supported"


class OutputNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    markup: Optional[RawMarkup] = None   # inséré verbatim
    text: Optional[str] = None           # échappé par la surface
    children: Tuple["OutputNode", ...] = ()

    @property
    def is_fallback(self) -> bool:
        """Vrai pour le nœud de substitution des blocs non supportés."""
        return self == FALLBACK_NODE


# Bloc inconnu → paragraphe texte fixe, sans balisage ni enfants
FALLBACK_NODE = OutputNode(tag="p", text=FALLBACK_TEXT)
