"""Domain layer - value objects and errors of the nesting engine."""

from .exceptions import NestingError, PartTooLargeForSheetError
from .value_objects import (
    DEFAULT_SHEET_SIZE,
    SHEET_SIZE_PRESETS,
    EdgeBanding,
    FreeRectangle,
    GrainDirection,
    NestingResult,
    PartInstance,
    PartSpecification,
    PlacedPart,
    SheetSize,
    UnplacedPart,
)

__all__ = [
    "DEFAULT_SHEET_SIZE",
    "EdgeBanding",
    "FreeRectangle",
    "GrainDirection",
    "NestingError",
    "NestingResult",
    "PartInstance",
    "PartSpecification",
    "PartTooLargeForSheetError",
    "PlacedPart",
    "SHEET_SIZE_PRESETS",
    "SheetSize",
    "UnplacedPart",
]
