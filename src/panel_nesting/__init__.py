"""Panel nesting: place rectangular cabinet parts onto stock sheets.

Example:
    ```python
    from panel_nesting import PartSpecification, GrainDirection, optimize_nesting

    parts = [
        PartSpecification(id="side", length=720, width=560, quantity=2,
                          grain=GrainDirection.LENGTH, material_type="Plywood",
                          thickness=18),
    ]
    for result in optimize_nesting(parts, strategy_name="binpacking"):
        print(result.material_type, result.sheet_count, result.efficiency)
    ```
"""

from panel_nesting.application import (
    NestingConfig,
    NestingService,
    StrategyRegistry,
    optimize_nesting,
)
from panel_nesting.domain import (
    EdgeBanding,
    GrainDirection,
    NestingError,
    NestingResult,
    PartSpecification,
    PartTooLargeForSheetError,
    PlacedPart,
    SheetSize,
    UnplacedPart,
)

__version__ = "0.1.0"

__all__ = [
    "EdgeBanding",
    "GrainDirection",
    "NestingConfig",
    "NestingError",
    "NestingResult",
    "NestingService",
    "PartSpecification",
    "PartTooLargeForSheetError",
    "PlacedPart",
    "SheetSize",
    "StrategyRegistry",
    "UnplacedPart",
    "optimize_nesting",
]
