"""
Family tree layout entry point.

Pure function of its inputs: member list + view state in, positioned nodes and
edges out. Nothing is cached between calls.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from shared.graph import count_descendants
from shared.models import coerce_members

from .annotate import annotate_members, node_commands
from .config import coerce_config, effective_viewport_width
from .constants import DEFAULT_VIEWPORT_WIDTH
from .edges import build_edges
from .models import LayoutResult, NodeData, NodePosition, PositionedNode
from .placement import assign_x_positions, compute_y
from .visibility import resolve_visibility


def layout_tree(
    all_members: List[Any],
    search_query: str = "",
    collapsed_states: Optional[Dict[str, bool]] = None,
    focused_member_id: Optional[str] = None,
    config: Any = None,
    can_edit: bool = False,
    viewport_width: Optional[float] = DEFAULT_VIEWPORT_WIDTH,
) -> LayoutResult:
    """
    Compute the displayed family graph.

    all_members: Member instances or raw member dicts.
    collapsed_states: member id -> True hides that member's descendants.
    focused_member_id: restrict to this member's subtree (generations renumbered from 1).
    config: LayoutConfig, dict of spacing values, or None for defaults.
    Returns LayoutResult(nodes, edges); empty when there are no members.
    """
    cfg = coerce_config(config)
    width = effective_viewport_width(viewport_width)
    members = coerce_members(all_members)
    if not members:
        return LayoutResult()

    vis = resolve_visibility(members, focused_member_id, collapsed_states)
    visible = vis.visible

    annotations = annotate_members(visible, search_query, collapsed_states)
    x_positions = assign_x_positions(visible, cfg, width)

    nodes: List[PositionedNode] = []
    for m in visible:
        ann = annotations[m.id]
        nodes.append(PositionedNode(
            id=m.id,
            position=NodePosition(x=x_positions[m.id], y=compute_y(m.generation, cfg.generation_spacing)),
            data=NodeData(
                member=m,
                is_highlighted=ann.is_highlighted,
                is_collapsed=ann.is_collapsed,
                has_children=ann.has_children,
                is_focused=m.id == vis.focus_id,
                descendant_count=count_descendants(vis.graph, m.id),
                can_edit=can_edit,
                commands=node_commands(m.id, ann, can_edit),
            ),
        ))

    edges = build_edges(visible)
    logger.debug(
        "Family layout: {} of {} members displayed, {} edges (focus={})",
        len(nodes), len(members), len(edges), vis.focus_id,
    )
    return LayoutResult(nodes=nodes, edges=edges)
