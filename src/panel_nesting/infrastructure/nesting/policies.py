"""Placement policy switches shared by strategies and layout engines."""

from __future__ import annotations

from enum import Enum


class RotationPolicy(str, Enum):
    """Order in which legal orientations are attempted.

    Attributes:
        LEGAL: Unrotated first, then rotated when the grain allows it.
        SHUFFLED: Coin flip per part decides whether a grain-free part
            tries the rotated orientation first.
    """

    LEGAL = "legal"
    SHUFFLED = "shuffled"


class GrainFallback(str, Enum):
    """When a part may be placed against its grain.

    Attributes:
        NEVER: Grain is always respected.
        ALWAYS: Tried whenever legal orientations fail, on any sheet.
        PROBABILISTIC: Tried on the active sheet with a fixed probability,
            always tried on a fresh sheet.
    """

    NEVER = "never"
    ALWAYS = "always"
    PROBABILISTIC = "probabilistic"


class LayoutMode(str, Enum):
    """Placement machinery a strategy runs on.

    Attributes:
        FREE_RECTANGLES: Best Short Side Fit over the free-rectangle model.
        JITTERED_GRID: Coarse grid walk with random jitter, no packing search.
        STRIP: Row strips filled left to right.
        CELL_GRID: Row strips snapped to a fixed cell grid.
    """

    FREE_RECTANGLES = "free_rectangles"
    JITTERED_GRID = "jittered_grid"
    STRIP = "strip"
    CELL_GRID = "cell_grid"
