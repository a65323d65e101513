"""Family tree layout - computes positioned nodes and edges for the tree view."""

from .config import LayoutConfig
from .engine import layout_tree
from .models import LayoutEdge, LayoutResult, NodeAction, NodeCommand, PositionedNode
from .visibility import resolve_visible_members

__all__ = [
    "LayoutConfig",
    "LayoutEdge",
    "LayoutResult",
    "NodeAction",
    "NodeCommand",
    "PositionedNode",
    "layout_tree",
    "resolve_visible_members",
]
