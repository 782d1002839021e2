"""Bloc Header — titre de niveau `level` (1-6 attendu, non validé)."""
from typing import Literal

from ..core.markup import RawMarkup
from .base import BaseBlock, BlockData


class HeaderData(BlockData):
    text: RawMarkup
    level: int


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    data: HeaderData
