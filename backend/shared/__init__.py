"""Shared models and graph utilities for layout and API."""

from .graph import (
    ancestor_path,
    build_parent_graph,
    compute_ancestors,
    compute_descendants,
)
from .models import Member, coerce_members

__all__ = [
    "Member",
    "ancestor_path",
    "build_parent_graph",
    "coerce_members",
    "compute_ancestors",
    "compute_descendants",
]
