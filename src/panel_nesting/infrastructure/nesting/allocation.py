"""Running placement state shared by every layout engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from panel_nesting.domain.value_objects import (
    PartInstance,
    PlacedPart,
    SheetSize,
    UnplacedPart,
)

from .grain import oriented_size

logger = logging.getLogger(__name__)


@dataclass
class Allocation:
    """Accumulated placements for one material group.

    Sheets are not kept as objects: a part never moves back to an earlier
    sheet, so only the running sheet count is needed.

    Attributes:
        sheet_size: Stock sheet dimensions.
        placed: Placed parts in placement order.
        unplaced: Instances that cannot fit an empty sheet.
        sheet_count: Sheets opened so far (the first is opened lazily).
        used_area: Sum of unrotated part areas placed so far.
    """

    sheet_size: SheetSize
    placed: list[PlacedPart] = field(default_factory=list)
    unplaced: list[UnplacedPart] = field(default_factory=list)
    sheet_count: int = 0
    used_area: float = 0.0

    @property
    def sheet_index(self) -> int:
        """Zero-based index of the active sheet."""
        return max(self.sheet_count - 1, 0)

    @property
    def total_area(self) -> float:
        return self.sheet_size.area * self.sheet_count

    @property
    def waste_area(self) -> float:
        return self.total_area - self.used_area

    @property
    def efficiency(self) -> float:
        """Used area as a percentage of consumed sheet area."""
        if self.total_area == 0:
            return 0.0
        return self.used_area / self.total_area * 100

    def open_sheet(self) -> None:
        self.sheet_count += 1

    def record(
        self,
        instance: PartInstance,
        x: float,
        y: float,
        rotated: bool,
        grain_violated: bool = False,
    ) -> PlacedPart:
        """Record a placement on the active sheet."""
        length, width = oriented_size(instance.length, instance.width, rotated)
        placed = PlacedPart(
            id=instance.id,
            spec_id=instance.spec_id,
            x=x,
            y=y,
            length=length,
            width=width,
            rotation=90 if rotated else 0,
            grain=instance.grain,
            grain_violated=grain_violated,
            sheet_index=self.sheet_index,
            part_name=instance.part_name,
            edge_banding=instance.edge_banding,
        )
        self.placed.append(placed)
        self.used_area += instance.area

        if grain_violated:
            logger.debug(
                "Part '%s' placed against its %s grain on sheet %d",
                instance.id,
                instance.grain.value,
                self.sheet_index,
            )
        return placed

    def reject(self, instance: PartInstance) -> UnplacedPart:
        """Report an instance that does not fit an empty sheet."""
        unplaced = UnplacedPart(
            instance_id=instance.id,
            spec_id=instance.spec_id,
            length=instance.length,
            width=instance.width,
            grain=instance.grain,
            reason=(
                f"{instance.length:g}x{instance.width:g} exceeds sheet "
                f"{self.sheet_size.label} in every allowed orientation"
            ),
        )
        self.unplaced.append(unplaced)
        logger.warning(
            "Part '%s' (%sx%s) is too large for a %s sheet, skipping",
            instance.id,
            instance.length,
            instance.width,
            self.sheet_size.label,
        )
        return unplaced
