"""Pydantic request schemas for API."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from family_layout import LayoutConfig
from family_layout.constants import DEFAULT_VIEWPORT_WIDTH
from shared.models import Member


class LayoutRequest(BaseModel):
    """Full member list plus view state; the backend returns positioned nodes and edges."""
    model_config = ConfigDict(populate_by_name=True)
    members: List[Member] = Field(default_factory=list)
    search_query: str = Field(default="", alias="searchQuery")
    collapsed_states: Dict[str, bool] = Field(default_factory=dict, alias="collapsedStates")
    focused_member_id: Optional[str] = Field(default=None, alias="focusedMemberId")
    config: LayoutConfig = Field(default_factory=LayoutConfig)
    can_edit: bool = Field(default=False, alias="canEdit")
    viewport_width: float = Field(default=DEFAULT_VIEWPORT_WIDTH, alias="viewportWidth")


class BreadcrumbRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    members: List[Member] = Field(default_factory=list)
    member_id: str = Field(..., alias="memberId")
