"""Grain direction policy.

The sheet grain runs along the sheet length. An unrotated part keeps its
length on the sheet length axis; a rotated part puts its width there.

- LENGTH grain: only the unrotated orientation is legal.
- WIDTH grain: only the rotated orientation is legal.
- NONE: both orientations are legal.

Strategies that trade quality for yield may place a part in an illegal
orientation; such placements are flagged ``grain_violated``.
"""

from __future__ import annotations

from panel_nesting.domain.value_objects import GrainDirection, PlacedPart

_BOTH = (False, True)


def is_orientation_legal(grain: GrainDirection, rotated: bool) -> bool:
    """Whether placing a part with ``grain`` in this orientation keeps the grain."""
    if grain == GrainDirection.LENGTH:
        return not rotated
    if grain == GrainDirection.WIDTH:
        return rotated
    return True


def legal_orientations(grain: GrainDirection) -> tuple[bool, ...]:
    """Rotation flags allowed by the grain, unrotated first."""
    return tuple(r for r in _BOTH if is_orientation_legal(grain, r))


def violating_orientations(grain: GrainDirection) -> tuple[bool, ...]:
    """Rotation flags that break the grain requirement."""
    return tuple(r for r in _BOTH if not is_orientation_legal(grain, r))


def primary_orientation(grain: GrainDirection) -> bool:
    """The orientation used by layout modes that never rotate for fit."""
    return legal_orientations(grain)[0]


def oriented_size(length: float, width: float, rotated: bool) -> tuple[float, float]:
    """Extents along the sheet (length, width) for a part in an orientation."""
    return (width, length) if rotated else (length, width)


def satisfies_grain(part: PlacedPart) -> bool:
    """Whether a placed part's final orientation honours its declared grain."""
    return is_orientation_legal(part.grain, part.rotated)
