"""Per-node view flags: search highlight, collapse state, children, available commands."""

from typing import Dict, List, NamedTuple, Optional

from shared.models import Member

from .models import NodeAction, NodeCommand


class Annotation(NamedTuple):
    is_highlighted: bool
    is_collapsed: bool
    has_children: bool


def is_highlighted(name: str, search_query: Optional[str]) -> bool:
    """Case-insensitive substring match; an empty query highlights nothing."""
    if not search_query:
        return False
    return search_query.lower() in (name or "").lower()


def annotate_members(
    visible: List[Member],
    search_query: Optional[str],
    collapsed_states: Optional[Dict[str, bool]],
) -> Dict[str, Annotation]:
    collapsed_states = collapsed_states or {}
    referenced = {pid for m in visible for pid in m.parents if pid != m.id}
    return {
        m.id: Annotation(
            is_highlighted=is_highlighted(m.name, search_query),
            is_collapsed=bool(collapsed_states.get(m.id)),
            has_children=m.id in referenced,
        )
        for m in visible
    }


def node_commands(member_id: str, annotation: Annotation, can_edit: bool) -> List[NodeCommand]:
    actions = [NodeAction.SELECT]
    # a collapsed node has no visible children but must still be expandable
    if annotation.has_children or annotation.is_collapsed:
        actions.append(NodeAction.TOGGLE_COLLAPSE)
    if can_edit:
        actions.extend([NodeAction.EDIT, NodeAction.DELETE])
    return [NodeCommand(action=a, member_id=member_id) for a in actions]
