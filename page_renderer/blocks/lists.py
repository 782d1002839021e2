"""Bloc List — liste ordonnée ou non, un item par entrée."""
from typing import Literal, Optional, Tuple

from ..core.markup import RawMarkup
from .base import BaseBlock, BlockData


class ListData(BlockData):
    # Valeur libre : seul "ordered" donne une liste ordonnée
    style: Optional[str] = None
    items: Tuple[RawMarkup, ...] = ()


class ListBlock(BaseBlock):
    type: Literal["list"] = "list"
    data: ListData = ListData()
