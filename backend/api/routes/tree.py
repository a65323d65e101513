"""Tree API - layout, breadcrumbs, sample tree."""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from loguru import logger

from family_layout import layout_tree
from family_layout.constants import DEFAULT_VIEWPORT_WIDTH
from sample import load_sample_members
from shared.graph import ancestor_path

from ..schemas import BreadcrumbRequest, LayoutRequest

router = APIRouter()


@router.post("/layout")
async def post_layout(body: LayoutRequest):
    try:
        result = layout_tree(
            body.members,
            search_query=body.search_query,
            collapsed_states=body.collapsed_states,
            focused_member_id=body.focused_member_id,
            config=body.config,
            can_edit=body.can_edit,
            viewport_width=body.viewport_width,
        )
        return result.to_payload()
    except Exception as e:
        logger.exception("Tree layout error")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to compute layout"})


@router.post("/breadcrumbs")
async def post_breadcrumbs(body: BreadcrumbRequest):
    path = ancestor_path(body.member_id, body.members)
    if not path:
        return JSONResponse(status_code=404, content={"error": f"Member {body.member_id} not found"})
    return {"path": [{"id": m.id, "name": m.name} for m in path]}


@router.get("/sample")
async def get_sample_tree(
    search: str = Query(""),
    focus: Optional[str] = Query(None),
    viewport_width: float = Query(DEFAULT_VIEWPORT_WIDTH, alias="viewportWidth"),
):
    """Layout of the bundled demo family."""
    try:
        members = load_sample_members()
        result = layout_tree(members, search_query=search, focused_member_id=focus, viewport_width=viewport_width)
        return result.to_payload()
    except Exception as e:
        logger.exception("Error building sample tree")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to load sample tree"})
