"""
Protocol Surface — interface pluggable pour les surfaces de sortie (HTML, JSON…).
"""
from typing import Protocol, Sequence, runtime_checkable

from ..core.nodes import OutputNode
from ..fetcher.state import FetchState


@runtime_checkable
class Surface(Protocol):
    def render_nodes(self, nodes: Sequence[OutputNode]) -> str: ...
    def render_state(self, state: FetchState) -> str: ...
