"""Parent -> child edges between displayed members."""

from typing import List

from shared.models import Member

from .models import LayoutEdge


def edge_id(parent_id: str, child_id: str) -> str:
    return f"edge-{parent_id}-to-{child_id}"


def build_edges(visible: List[Member]) -> List[LayoutEdge]:
    """One edge per (parent, member) pair where both ends are displayed."""
    ids = {m.id for m in visible}
    edges: List[LayoutEdge] = []
    for m in visible:
        for pid in dict.fromkeys(m.parents):
            if pid in ids:
                edges.append(LayoutEdge(id=edge_id(pid, m.id), source=pid, target=m.id))
    return edges
