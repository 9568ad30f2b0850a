"""Panel nesting core: free-space model, placement search and layout engines."""

from .allocation import Allocation
from .allocator import SheetAllocator
from .free_rectangles import FreeRectangleSheet
from .grain import (
    is_orientation_legal,
    legal_orientations,
    oriented_size,
    primary_orientation,
    satisfies_grain,
    violating_orientations,
)
from .grid_layouts import CellGridLayout, JitteredGridLayout, StripLayout
from .placement import Position, find_position, short_side_fit
from .policies import GrainFallback, LayoutMode, RotationPolicy

__all__ = [
    "Allocation",
    "CellGridLayout",
    "FreeRectangleSheet",
    "GrainFallback",
    "JitteredGridLayout",
    "LayoutMode",
    "Position",
    "RotationPolicy",
    "SheetAllocator",
    "StripLayout",
    "find_position",
    "is_orientation_legal",
    "legal_orientations",
    "oriented_size",
    "primary_orientation",
    "satisfies_grain",
    "short_side_fit",
    "violating_orientations",
]
