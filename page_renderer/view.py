"""
PageView — appelant du renderer pour une page nommée.

Pending au départ ; load() déclenche un seul fetch et mémorise l'état
terminal. Le renderer n'est appelé qu'en Ready.
"""
from typing import List, Optional

from .core.nodes import OutputNode
from .fetcher.state import ContentFetcher, FetchState, Pending, Ready
from .renderer.blocks import render
from .renderer.html import render_main


class PageView:
    """
    Usage:
        >>> view = PageView("home", SeedContentFetcher(BUNDLED_SEEDS_DIR))
        >>> view.load()
        >>> html = view.html()
    """

    def __init__(self, name: str, fetcher: ContentFetcher):
        self.name = name
        self.fetcher = fetcher
        self.state: FetchState = Pending()

    def load(self) -> FetchState:
        if isinstance(self.state, Pending):
            self.state = self.fetcher.fetch(self.name)
        return self.state

    def nodes(self) -> Optional[List[OutputNode]]:
        if isinstance(self.state, Ready):
            return render(self.state.page.blocks)
        return None

    def html(self) -> str:
        return render_main(self.state)
