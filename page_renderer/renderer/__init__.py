"""Renderers — cœur (blocs → nœuds) + surface HTML."""
from .blocks import render, render_block
from .html import HtmlSurface, render_main, render_node, render_nodes
from .base import Surface

__all__ = [
    "render", "render_block",
    "HtmlSurface", "render_main", "render_node", "render_nodes",
    "Surface",
]
