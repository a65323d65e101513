"""Layout configuration. Validated once at construction, immutable afterwards."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DEFAULT_GENERATION_SPACING,
    DEFAULT_MEMBER_SPACING,
    DEFAULT_NODE_WIDTH,
    DEFAULT_SIBLING_SPACING,
    DEFAULT_VIEWPORT_WIDTH,
)


class LayoutConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")
    generation_spacing: float = Field(DEFAULT_GENERATION_SPACING, alias="generationSpacing", gt=0)
    member_spacing: float = Field(DEFAULT_MEMBER_SPACING, alias="memberSpacing", ge=0)
    node_width: float = Field(DEFAULT_NODE_WIDTH, alias="nodeWidth", gt=0)
    sibling_spacing: float = Field(DEFAULT_SIBLING_SPACING, alias="siblingSpacing", ge=0)


def coerce_config(config: Any = None) -> LayoutConfig:
    """None -> defaults, dict -> validated LayoutConfig, LayoutConfig -> as is."""
    if config is None:
        return LayoutConfig()
    if isinstance(config, LayoutConfig):
        return config
    return LayoutConfig.model_validate(config)


def effective_viewport_width(viewport_width: Optional[float]) -> float:
    if not viewport_width or viewport_width <= 0:
        return float(DEFAULT_VIEWPORT_WIDTH)
    return float(viewport_width)
