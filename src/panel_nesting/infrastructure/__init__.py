"""Infrastructure layer - placement engines and output formatters."""

from .formatters import NestingJsonExporter, NestingReportFormatter
from .nesting import (
    Allocation,
    CellGridLayout,
    FreeRectangleSheet,
    GrainFallback,
    JitteredGridLayout,
    LayoutMode,
    RotationPolicy,
    SheetAllocator,
    StripLayout,
)

__all__ = [
    "Allocation",
    "CellGridLayout",
    "FreeRectangleSheet",
    "GrainFallback",
    "JitteredGridLayout",
    "LayoutMode",
    "NestingJsonExporter",
    "NestingReportFormatter",
    "RotationPolicy",
    "SheetAllocator",
    "StripLayout",
]
