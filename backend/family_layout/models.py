"""Layout output: positioned nodes, edges and the per-node commands a renderer may dispatch."""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from shared.models import Member

from .constants import (
    EDGE_MARKER,
    EDGE_PATH_OPTIONS,
    EDGE_STYLE,
    EDGE_TYPE,
    NODE_TYPE,
    SOURCE_POSITION,
    TARGET_POSITION,
)


class NodeAction(str, Enum):
    SELECT = "select"
    EDIT = "edit"
    DELETE = "delete"
    TOGGLE_COLLAPSE = "toggle_collapse"


class NodeCommand(BaseModel):
    """A UI action available on a node. Layout only lists them; the renderer dispatches."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    action: NodeAction
    member_id: str = Field(..., alias="memberId")


class NodePosition(BaseModel):
    x: float
    y: float


class NodeData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    member: Member
    is_highlighted: bool = Field(False, alias="isHighlighted")
    is_collapsed: bool = Field(False, alias="isCollapsed")
    has_children: bool = Field(False, alias="hasChildren")
    is_focused: bool = Field(False, alias="isFocused")
    descendant_count: int = Field(0, alias="descendantCount")
    can_edit: bool = Field(False, alias="canEdit")
    commands: List[NodeCommand] = Field(default_factory=list)


class PositionedNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: str
    type: str = NODE_TYPE
    position: NodePosition
    data: NodeData
    source_position: str = Field(SOURCE_POSITION, alias="sourcePosition")
    target_position: str = Field(TARGET_POSITION, alias="targetPosition")


class LayoutEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: str
    source: str
    target: str
    type: str = EDGE_TYPE
    animated: bool = True
    marker_end: Dict[str, Any] = Field(default_factory=lambda: dict(EDGE_MARKER), alias="markerEnd")
    style: Dict[str, Any] = Field(default_factory=lambda: dict(EDGE_STYLE))
    path_options: Dict[str, Any] = Field(default_factory=lambda: dict(EDGE_PATH_OPTIONS), alias="pathOptions")


class LayoutResult(BaseModel):
    nodes: List[PositionedNode] = Field(default_factory=list)
    edges: List[LayoutEdge] = Field(default_factory=list)

    def node(self, node_id: str) -> PositionedNode:
        """Lookup by id; raises KeyError when the node is not in the layout."""
        for n in self.nodes:
            if n.id == node_id:
                return n
        raise KeyError(node_id)

    def to_payload(self) -> Dict[str, Any]:
        """camelCase dict for the renderer."""
        return self.model_dump(by_alias=True, mode="json")
