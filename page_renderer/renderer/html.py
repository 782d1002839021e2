"""
Surface HTML — OutputNode → fragment HTML, état de fetch → <main>.

markup : inséré verbatim (RawMarkup, déjà assaini en amont)
text   : échappé (texte simple, ex. nœud de fallback)
"""
import html
from typing import Sequence

from ..core.nodes import OutputNode
from ..fetcher.state import FetchState, Failed, Pending, Ready
from .blocks import render

LOADING_HTML = "<main>Loading...</main>"
ERROR_HTML   = "<main>Error</main>"


def render_node(node: OutputNode) -> str:
    if node.children:
        inner = "".join(render_node(c) for c in node.children)
    elif node.markup is not None:
        inner = str(node.markup)
    elif node.text is not None:
        inner = html.escape(node.text)
    else:
        inner = ""
    return f"<{node.tag}>{inner}</{node.tag}>"


def render_nodes(nodes: Sequence[OutputNode]) -> str:
    return "\n".join(render_node(n) for n in nodes)


def render_main(state: FetchState) -> str:
    """Placeholder pour loading/error ; le renderer n'est appelé qu'en ready."""
    if isinstance(state, Pending):
        return LOADING_HTML
    if isinstance(state, Failed):
        return ERROR_HTML
    if isinstance(state, Ready):
        return f"<main>\n{render_nodes(render(state.page.blocks))}\n</main>"
    raise TypeError(f"État de fetch inattendu : {state!r}")


class HtmlSurface:
    """Implémentation HTML du protocol Surface."""

    def render_nodes(self, nodes: Sequence[OutputNode]) -> str:
        return render_nodes(nodes)

    def render_state(self, state: FetchState) -> str:
        return render_main(state)
