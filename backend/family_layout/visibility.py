"""
Visibility: which members are displayed for a given focus and collapse state.

Focus re-roots the tree at the focused member (generations renumbered from 1).
Collapse hides every strict descendant of a collapsed member within the working
set. Both focused and unfocused views go through the same reachability rule;
the focus root is always kept.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple

import networkx as nx
from loguru import logger

from shared.graph import build_parent_graph, compute_descendants, strict_descendant_ids
from shared.models import Member, index_members


class Visibility(NamedTuple):
    working: List[Member]
    visible: List[Member]
    focus_id: Optional[str]
    graph: nx.DiGraph


def select_working_set(
    members: List[Member],
    focused_member_id: Optional[str] = None,
) -> Tuple[List[Member], Optional[str]]:
    """Returns (working set, effective focus id). Unknown focus falls back to all members."""
    if focused_member_id:
        if focused_member_id in index_members(members):
            return compute_descendants(focused_member_id, members, 1), focused_member_id
        logger.warning("Focused member {} not found, showing full tree", focused_member_id)
    return list(members), None


def collapsed_ids(collapsed_states: Optional[Dict[str, bool]]) -> List[str]:
    return [mid for mid, flag in (collapsed_states or {}).items() if flag]


def resolve_visibility(
    members: List[Member],
    focused_member_id: Optional[str] = None,
    collapsed_states: Optional[Dict[str, bool]] = None,
) -> Visibility:
    working, focus_id = select_working_set(members, focused_member_id)
    G = build_parent_graph(working)

    hidden = strict_descendant_ids(G, collapsed_ids(collapsed_states))
    if focus_id:
        hidden.discard(focus_id)

    visible = [m for m in working if m.id not in hidden]
    return Visibility(working=working, visible=visible, focus_id=focus_id, graph=G)


def resolve_visible_members(
    members: List[Member],
    focused_member_id: Optional[str] = None,
    collapsed_states: Optional[Dict[str, bool]] = None,
) -> List[Member]:
    """Filtered members to display, each carrying its display generation."""
    return resolve_visibility(members, focused_member_id, collapsed_states).visible
