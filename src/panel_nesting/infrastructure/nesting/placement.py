"""Best Short Side Fit placement search over a sheet's free rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from panel_nesting.domain.value_objects import FreeRectangle, GrainDirection

from .free_rectangles import FreeRectangleSheet
from .grain import is_orientation_legal


@dataclass(frozen=True)
class Position:
    """Where a part goes: flush to the top-left corner of ``rect``.

    Attributes:
        rect: The winning free rectangle.
        x: Placement x coordinate (``rect.x``).
        y: Placement y coordinate (``rect.y``).
        rotated: The orientation that was requested.
    """

    rect: FreeRectangle
    x: float
    y: float
    rotated: bool = False


def short_side_fit(rect: FreeRectangle, part_length: float, part_width: float) -> float:
    """Smaller of the two leftovers after placing a part into ``rect``."""
    return min(rect.length - part_length, rect.width - part_width)


def find_position(
    sheet: FreeRectangleSheet,
    part_length: float,
    part_width: float,
    grain: GrainDirection,
    rotated: bool = False,
) -> Position | None:
    """Find the free rectangle that fits a part with the least short-side leftover.

    ``part_length`` and ``part_width`` are the extents as they would be placed,
    i.e. already swapped by the caller for a rotated attempt.

    Args:
        sheet: Free-space model of the active sheet.
        part_length: Extent along the sheet length.
        part_width: Extent along the sheet width.
        grain: Grain requirement to enforce (``NONE`` to bypass).
        rotated: Whether this attempt is the rotated orientation.

    Returns:
        The best position, or None if the orientation is illegal for the
        grain or no free rectangle is large enough. Ties keep the first
        rectangle encountered.
    """
    if not is_orientation_legal(grain, rotated):
        return None

    best: FreeRectangle | None = None
    best_score = 0.0

    for rect in sheet.free_rectangles:
        if not rect.fits(part_length, part_width):
            continue
        score = short_side_fit(rect, part_length, part_width)
        if best is None or score < best_score:
            best = rect
            best_score = score

    if best is None:
        return None
    return Position(rect=best, x=best.x, y=best.y, rotated=rotated)
