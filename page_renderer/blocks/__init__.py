"""
Blocs — exports publics, union taguée et parsing depuis les records bruts.

parse_block() résout le type via le registry ; un type absent du registry
donne un UnknownBlock (jamais d'erreur). Un type connu dont le data ne
correspond pas au schéma lève pydantic.ValidationError.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from .base import BaseBlock, BlockData
from .paragraph import ParagraphBlock, ParagraphData
from .header import HeaderBlock, HeaderData
from .lists import ListBlock, ListData
from .unknown import UnknownBlock

log = logging.getLogger(__name__)

Block = Union[ParagraphBlock, HeaderBlock, ListBlock, UnknownBlock]

# ── Registry des blocs connus ────────────────────────────────────────────────

BLOCK_REGISTRY: Dict[str, type] = {
    "paragraph": ParagraphBlock,
    "header":    HeaderBlock,
    "list":      ListBlock,
}


def parse_block(raw: Mapping[str, Any]) -> Block:
    """Instancie le bloc correspondant à raw["type"] (UnknownBlock sinon)."""
    if not isinstance(raw, Mapping):
        raise ValueError(f"Bloc attendu sous forme d'objet, reçu {type(raw).__name__}")
    block_type = raw.get("type")
    if not isinstance(block_type, str):
        block_type = ""

    block_cls = BLOCK_REGISTRY.get(block_type)
    if block_cls is None:
        log.debug("Type de bloc inconnu : %r", block_type)
        data = raw.get("data")
        return UnknownBlock(
            id=raw.get("id"),
            type=block_type,
            data=dict(data) if isinstance(data, Mapping) else {},
        )
    return block_cls.model_validate(raw)


def parse_blocks(raws: Iterable[Any]) -> List[Block]:
    """Parse une séquence de records en conservant l'ordre."""
    return [r if isinstance(r, BaseBlock) else parse_block(r) for r in raws]


__all__ = [
    "BaseBlock", "BlockData", "Block",
    "ParagraphBlock", "ParagraphData",
    "HeaderBlock", "HeaderData",
    "ListBlock", "ListData",
    "UnknownBlock",
    "BLOCK_REGISTRY", "parse_block", "parse_blocks",
]
