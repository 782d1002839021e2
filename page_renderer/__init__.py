"""
Page Renderer — récupère une page de blocs typés et la rend en nœuds de sortie.

Usage (blocs directs):
    >>> from page_renderer import parse_blocks, render
    >>> nodes = render(parse_blocks([{"type": "header", "data": {"text": "Hi", "level": 2}}]))

Usage (page du service):
    >>> from page_renderer import PageView, GraphQLContentFetcher
    >>> view = PageView("home", GraphQLContentFetcher("http://127.0.0.1:8000/graphql"))
    >>> view.load()
    >>> html = view.html()
"""
__version__ = "0.1.0"

from .core import FALLBACK_NODE, FALLBACK_TEXT, OutputNode, RawMarkup
from .blocks import (
    BaseBlock, Block,
    ParagraphBlock, ParagraphData,
    HeaderBlock, HeaderData,
    ListBlock, ListData,
    UnknownBlock,
    BLOCK_REGISTRY, parse_block, parse_blocks,
)
from .renderer import HtmlSurface, Surface, render, render_block, render_main, render_nodes
from .fetcher import (
    ContentFetcher, ContentServiceError, FetchState, Failed, PageContent, Pending, Ready,
    GraphQLContentFetcher, SeedContentFetcher, parse_page,
)
from .view import PageView

__all__ = [
    # core
    "RawMarkup", "OutputNode", "FALLBACK_NODE", "FALLBACK_TEXT",
    # blocs
    "BaseBlock", "Block",
    "ParagraphBlock", "ParagraphData",
    "HeaderBlock", "HeaderData",
    "ListBlock", "ListData",
    "UnknownBlock",
    "BLOCK_REGISTRY", "parse_block", "parse_blocks",
    # renderer
    "render", "render_block", "render_main", "render_nodes", "HtmlSurface", "Surface",
    # fetch
    "ContentFetcher", "ContentServiceError", "FetchState", "Failed", "PageContent",
    "Pending", "Ready", "GraphQLContentFetcher", "SeedContentFetcher", "parse_page",
    # vue
    "PageView",
]
