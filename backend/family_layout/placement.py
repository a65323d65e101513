"""
Node placement for the family tree.

Y is a pure function of display generation. X is assigned generation by
generation in ascending order, since each row is centered on the finalized
positions of the row above:
  - generation 1: sorted by id, spouses paired, row centered in the viewport
  - later generations: members grouped into sibling groups (same parent set),
    groups laid out left to right, the whole row centered on the
    member-weighted mean of the groups' parent positions
"""

from typing import Dict, List, Tuple

from shared.models import Member

from .config import LayoutConfig


def compute_y(generation: int, generation_spacing: float) -> float:
    return (generation - 1) * generation_spacing


def parent_key(member: Member) -> Tuple:
    """Sibling group key: sorted parent ids. Parentless members get their own group."""
    if member.parents:
        return (1,) + tuple(sorted(member.parents))
    return (0, member.id)


def _place_first_generation(
    members: List[Member],
    config: LayoutConfig,
    viewport_width: float,
) -> Tuple[Dict[str, float], float]:
    """Left-to-right sweep with spouse pairing, then shift the row to the viewport center."""
    ordered = sorted(members, key=lambda m: m.id)
    by_id = {m.id: m for m in ordered}
    step = config.node_width + config.member_spacing

    xs: Dict[str, float] = {}
    cursor = 0.0
    for m in ordered:
        if m.id in xs:
            continue
        xs[m.id] = cursor
        last = cursor
        spouse = by_id.get(m.spouse) if m.spouse and m.spouse != m.id else None
        if spouse is not None and spouse.id not in xs:
            last = cursor + config.member_spacing
            xs[spouse.id] = last
        cursor = last + step

    left = min(xs.values())
    right = max(xs.values()) + config.node_width
    shift = viewport_width / 2 - (left + right) / 2
    placed = {mid: x + shift for mid, x in xs.items()}
    center_x = (left + right) / 2 + shift
    return placed, center_x


def _place_generation(
    members: List[Member],
    config: LayoutConfig,
    positions: Dict[str, float],
    fallback_center_x: float,
) -> Dict[str, float]:
    groups: Dict[Tuple, List[Member]] = {}
    for m in members:
        groups.setdefault(parent_key(m), []).append(m)
    keys = sorted(groups)

    widths: List[float] = []
    anchors: List[float] = []
    for key in keys:
        group = groups[key]
        count = len(group)
        widths.append(count * config.node_width + (count - 1) * config.sibling_spacing)
        parent_xs = [positions[p] for p in set(group[0].parents) if p in positions]
        anchors.append(sum(parent_xs) / len(parent_xs) if parent_xs else fallback_center_x)

    counts = [len(groups[k]) for k in keys]
    collective_center_x = sum(a * c for a, c in zip(anchors, counts)) / sum(counts)
    total_width = sum(widths) + (len(keys) - 1) * config.member_spacing

    placed: Dict[str, float] = {}
    cursor = collective_center_x - total_width / 2
    slot = config.node_width + config.sibling_spacing
    for key, width in zip(keys, widths):
        for i, m in enumerate(groups[key]):
            placed[m.id] = cursor + i * slot + config.node_width / 2
        cursor += width + config.member_spacing
    return placed


def assign_x_positions(
    members: List[Member],
    config: LayoutConfig,
    viewport_width: float,
) -> Dict[str, float]:
    """Final x per member id. members carry display generations."""
    by_generation: Dict[int, List[Member]] = {}
    for m in members:
        by_generation.setdefault(m.generation, []).append(m)

    positions: Dict[str, float] = {}
    gen1_center_x = viewport_width / 2
    for g in sorted(by_generation):
        row = by_generation[g]
        if g == 1:
            placed, gen1_center_x = _place_first_generation(row, config, viewport_width)
        else:
            placed = _place_generation(row, config, positions, gen1_center_x)
        positions.update(placed)
    return positions
