"""Instance orderings applied before placement.

All orderings are stable: instances comparing equal keep their cutting-list
order, so deterministic strategies give identical layouts for identical
input.
"""

from __future__ import annotations

from typing import Sequence

from panel_nesting.domain.value_objects import GrainDirection, PartInstance

_GRAIN_PRIORITY = {
    GrainDirection.LENGTH: 0,
    GrainDirection.WIDTH: 1,
    GrainDirection.NONE: 2,
}


def insertion_order(instances: Sequence[PartInstance]) -> list[PartInstance]:
    return list(instances)


def by_area_desc(instances: Sequence[PartInstance]) -> list[PartInstance]:
    """Largest area first."""
    return sorted(instances, key=lambda p: p.area, reverse=True)


def by_longest_side_desc(instances: Sequence[PartInstance]) -> list[PartInstance]:
    """Longest of length/width first."""
    return sorted(instances, key=lambda p: p.longest_side, reverse=True)


def by_aspect_ratio_desc(instances: Sequence[PartInstance]) -> list[PartInstance]:
    """Highest length/width ratio first."""
    return sorted(instances, key=lambda p: p.length / p.width, reverse=True)


def by_grain_then_area(instances: Sequence[PartInstance]) -> list[PartInstance]:
    """LENGTH grain parts, then WIDTH, then grain-free; larger area first within each."""
    return sorted(instances, key=lambda p: (_GRAIN_PRIORITY[p.grain], -p.area))
