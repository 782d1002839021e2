"""Bloc Paragraph — un bloc de prose."""
from typing import Literal

from ..core.markup import RawMarkup
from .base import BaseBlock, BlockData


class ParagraphData(BlockData):
    text: RawMarkup


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    data: ParagraphData
