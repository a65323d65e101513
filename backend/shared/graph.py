"""
Graph utilities for the parent relation between family members.
Shared by visibility (collapse / focus) and layout.

Traversals are iterative with an explicit visited set: the member store does
not guarantee an acyclic parent relation, so the first generation assigned to
an id wins and cycle-closing edges are never re-expanded.
"""

from collections import deque
from typing import Dict, Iterable, List, Optional, Set

import networkx as nx
from loguru import logger

from .models import Member, index_members


def build_parent_graph(members: List[Member]) -> nx.DiGraph:
    """Build parent -> child graph. Parents not present in members are dropped."""
    G = nx.DiGraph()
    for m in members:
        G.add_node(m.id)
    for m in members:
        for pid in m.parents:
            if pid in G and pid != m.id:
                G.add_edge(pid, m.id)
    return G


def compute_descendants(
    root_id: str,
    members: List[Member],
    base_generation: int = 1,
    graph: Optional[nx.DiGraph] = None,
) -> List[Member]:
    """
    Return the root and every transitive child, re-tagged with
    generation = base_generation + depth from root (breadth-first, so a member
    reachable along several paths takes the shallowest depth).
    Returns [] if root_id is unknown. Input members are not modified.
    """
    by_id = index_members(members)
    root = by_id.get(root_id)
    if root is None:
        logger.warning("compute_descendants: member {} not found", root_id)
        return []

    G = graph if graph is not None else build_parent_graph(members)
    generations: Dict[str, int] = {root_id: base_generation}
    result = [root.with_generation(base_generation)]
    queue = deque([root_id])
    while queue:
        current = queue.popleft()
        for child_id in G.successors(current):
            if child_id in generations or child_id not in by_id:
                continue
            generations[child_id] = generations[current] + 1
            result.append(by_id[child_id].with_generation(generations[child_id]))
            queue.append(child_id)
    return result


def compute_ancestors(
    member_id: str,
    members: List[Member],
    base_generation: int = 1,
) -> List[Member]:
    """
    Breadth-first walk up the parent lists: the member at base_generation,
    parents at base_generation + 1, and so on. Unknown parent ids end that branch.
    Returns [] if member_id is unknown.
    """
    by_id = index_members(members)
    start = by_id.get(member_id)
    if start is None:
        logger.warning("compute_ancestors: member {} not found", member_id)
        return []

    generations: Dict[str, int] = {member_id: base_generation}
    result = [start.with_generation(base_generation)]
    queue = deque([member_id])
    while queue:
        current = queue.popleft()
        for pid in by_id[current].parents:
            if pid in generations or pid not in by_id:
                continue
            generations[pid] = generations[current] + 1
            result.append(by_id[pid].with_generation(generations[pid]))
            queue.append(pid)
    return result


def ancestor_path(member_id: str, members: List[Member]) -> List[Member]:
    """
    Breadcrumb chain from the oldest reachable ancestor down to member_id,
    following the first resolvable parent at each step, e.g. [grandparent, parent, member].
    """
    by_id = index_members(members)
    if member_id not in by_id:
        return []

    chain: List[Member] = []
    seen: Set[str] = set()
    current: Optional[str] = member_id
    while current is not None and current not in seen:
        seen.add(current)
        member = by_id[current]
        chain.append(member)
        current = next((p for p in member.parents if p in by_id), None)
    chain.reverse()
    return chain


def strict_descendant_ids(G: nx.DiGraph, roots: Iterable[str]) -> Set[str]:
    """Union of everything reachable below each root (roots themselves excluded unless reached from another root)."""
    hidden: Set[str] = set()
    for r in roots:
        if r in G:
            hidden |= nx.descendants(G, r)
    return hidden


def count_descendants(G: nx.DiGraph, member_id: str) -> int:
    if member_id not in G:
        return 0
    return len(nx.descendants(G, member_id))
