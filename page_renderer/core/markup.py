"""
RawMarkup — balisage riche déjà assaini par le service de contenu.

Le renderer l'insère tel quel dans la sortie, sans échappement.
La frontière de confiance reste côté service : rien ici ne nettoie le HTML.
"""
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class RawMarkup(str):
    """Chaîne de balisage de confiance (jamais ré-échappée par la surface HTML)."""

    __slots__ = ()

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"RawMarkup({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        # str brut → RawMarkup ; sérialisé comme une str ordinaire
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
