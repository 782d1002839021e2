"""
Renderer de blocs — séquence de blocs → séquence d'OutputNode.

Pur et total : pas d'I/O, pas d'exception métier, un nœud par bloc,
dans l'ordre d'entrée. Un bloc non supporté est remplacé par FALLBACK_NODE
(une page n'est jamais interrompue par un bloc inconnu).
"""
from typing import List, Sequence

from ..core.nodes import FALLBACK_NODE, OutputNode
from ..blocks import Block, HeaderBlock, ListBlock, ParagraphBlock

LIST_ITEM_TAG = "li"


# ── Point d'entrée public ───────────────────────────────────────────────────

def render(blocks: Sequence[Block]) -> List[OutputNode]:
    """Rend chaque bloc en un OutputNode (ordre conservé)."""
    return [render_block(b) for b in blocks]


# ── Dispatch ────────────────────────────────────────────────────────────────

def render_block(block: Block) -> OutputNode:
    """Dispatch vers le renderer du type ; fallback pour tout le reste."""
    if isinstance(block, ParagraphBlock): return render_paragraph(block)
    if isinstance(block, HeaderBlock):    return render_header(block)
    if isinstance(block, ListBlock):      return render_list(block)

    # UnknownBlock et tout objet non reconnu
    return FALLBACK_NODE


# ── Renderers par type ──────────────────────────────────────────────────────

def render_paragraph(b: ParagraphBlock) -> OutputNode:
    return OutputNode(tag="p", markup=b.data.text)


def render_header(b: HeaderBlock) -> OutputNode:
    # level hors 1-6 : transmis tel quel (h0, h7…)
    return OutputNode(tag=f"h{b.data.level}", markup=b.data.text)


def render_list(b: ListBlock) -> OutputNode:
    list_tag = "ol" if b.data.style == "ordered" else "ul"
    items = tuple(OutputNode(tag=LIST_ITEM_TAG, markup=item) for item in b.data.items)
    return OutputNode(tag=list_tag, children=items)
