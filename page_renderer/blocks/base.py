"""
Blocs de base pour page_renderer.
Un bloc = id opaque + type (discriminant) + data (payload propre au type).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BlockData(BaseModel):
    """Payload d'un bloc, forme déterminée par le type. Immuable."""
    model_config = ConfigDict(frozen=True)


class BaseBlock(BaseModel):
    """Bloc de base (classe parente de tous les blocs)."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    type: str
