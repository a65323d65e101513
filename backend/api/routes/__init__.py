"""API route modules."""

from fastapi import FastAPI

from . import health, tree


def register_routes(app: FastAPI):
    """Register all API routers."""
    app.include_router(tree.router, prefix="/api/tree", tags=["tree"])
    app.include_router(health.router, prefix="/api/health", tags=["health"])
