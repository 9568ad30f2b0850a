"""Strategy profiles: policy presets over the shared placement core.

A strategy is not a packer of its own. It is a ``StrategyProfile`` that
picks an instance ordering, a layout mode, rotation and grain-violation
policies, and an adjustment applied to the reported efficiency.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Sequence

from panel_nesting.infrastructure.nesting import (
    CellGridLayout,
    GrainFallback,
    JitteredGridLayout,
    LayoutMode,
    RotationPolicy,
    SheetAllocator,
    StripLayout,
)

from .ordering import insertion_order

if TYPE_CHECKING:
    from panel_nesting.contracts.strategies import LayoutEngine
    from panel_nesting.domain.value_objects import PartInstance, SheetSize

OrderingFn = Callable[[Sequence["PartInstance"]], list["PartInstance"]]


@dataclass(frozen=True)
class EfficiencyAdjustment:
    """Transformation from raw to reported efficiency.

    ``reported = raw * factor``, then limited by ``cap`` from above and
    raised to ``floor`` from below when those are set.
    """

    factor: float = 1.0
    cap: float | None = None
    floor: float | None = None

    def __post_init__(self) -> None:
        if self.factor <= 0:
            raise ValueError("Efficiency factor must be positive")

    def apply(self, raw_efficiency: float) -> float:
        adjusted = raw_efficiency * self.factor
        if self.cap is not None:
            adjusted = min(adjusted, self.cap)
        if self.floor is not None:
            adjusted = max(adjusted, self.floor)
        return adjusted


NO_ADJUSTMENT = EfficiencyAdjustment()


@dataclass(frozen=True)
class StrategyProfile:
    """Configuration of one selectable nesting strategy.

    Attributes:
        key: Registry name the strategy is selected by.
        label: Display name.
        description: One-line description.
        ordering: Function ordering instances before placement.
        layout: Placement machinery to run.
        rotation: Orientation ordering for the free-rectangle allocator.
        grain_fallback: Grain violation policy for the free-rectangle allocator.
        adjustment: Reported-efficiency adjustment.
        deterministic: False when the layout depends on random draws.
    """

    key: str
    label: str
    description: str = ""
    ordering: OrderingFn = field(default=insertion_order)
    layout: LayoutMode = LayoutMode.FREE_RECTANGLES
    rotation: RotationPolicy = RotationPolicy.LEGAL
    grain_fallback: GrainFallback = GrainFallback.NEVER
    adjustment: EfficiencyAdjustment = NO_ADJUSTMENT
    deterministic: bool = True

    def __post_init__(self) -> None:
        if not self.key or self.key != self.key.strip().lower():
            raise ValueError("Strategy key must be a non-empty lowercase name")

    def order(self, instances: Sequence["PartInstance"]) -> list["PartInstance"]:
        return self.ordering(instances)

    def build_engine(
        self,
        sheet_size: "SheetSize",
        rng: random.Random | None = None,
    ) -> "LayoutEngine":
        """Create the layout engine this profile runs on.

        Args:
            sheet_size: Stock sheet dimensions.
            rng: Random source for randomized profiles; unseeded when omitted.
        """
        if self.layout == LayoutMode.JITTERED_GRID:
            return JitteredGridLayout(sheet_size, rng=rng)
        if self.layout == LayoutMode.STRIP:
            return StripLayout(sheet_size)
        if self.layout == LayoutMode.CELL_GRID:
            return CellGridLayout(sheet_size)
        return SheetAllocator(
            sheet_size,
            rotation=self.rotation,
            grain_fallback=self.grain_fallback,
            rng=rng,
        )


__all__ = [
    "EfficiencyAdjustment",
    "NO_ADJUSTMENT",
    "OrderingFn",
    "StrategyProfile",
]
