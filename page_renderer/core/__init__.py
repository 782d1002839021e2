"""Core module pour page_renderer."""
from .markup import RawMarkup
from .nodes import FALLBACK_NODE, FALLBACK_TEXT, OutputNode

__all__ = [
    "RawMarkup",
    "OutputNode",
    "FALLBACK_NODE",
    "FALLBACK_TEXT",
]
