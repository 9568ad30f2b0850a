"""Multi-sheet allocation on top of the free-rectangle placement search."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from panel_nesting.domain.value_objects import GrainDirection, PartInstance, SheetSize

from .allocation import Allocation
from .free_rectangles import FreeRectangleSheet
from .grain import legal_orientations, oriented_size, violating_orientations
from .placement import Position, find_position
from .policies import GrainFallback, RotationPolicy

logger = logging.getLogger(__name__)


class SheetAllocator:
    """Places an ordered list of part instances onto as many sheets as needed.

    For each instance the allocator tries the active sheet first: legal
    orientations, then (policy permitting) grain-violating ones. When the
    active sheet has no room a new sheet is opened and the same attempts
    are repeated. Instances that cannot fit an empty sheet in any allowed
    orientation are reported and skipped without opening a sheet.

    Attributes:
        sheet_size: Stock sheet dimensions.
        rotation: Orientation ordering policy.
        grain_fallback: Grain violation policy.
        violation_probability: Chance of trying a grain violation on the
            active sheet under ``GrainFallback.PROBABILISTIC``.
    """

    def __init__(
        self,
        sheet_size: SheetSize,
        rotation: RotationPolicy = RotationPolicy.LEGAL,
        grain_fallback: GrainFallback = GrainFallback.NEVER,
        rng: random.Random | None = None,
        violation_probability: float = 0.7,
    ) -> None:
        if not 0 <= violation_probability <= 1:
            raise ValueError("Violation probability must be between 0 and 1")
        self.sheet_size = sheet_size
        self.rotation = rotation
        self.grain_fallback = grain_fallback
        self.violation_probability = violation_probability
        self._rng = rng if rng is not None else random.Random()

    def allocate(self, instances: Sequence[PartInstance]) -> Allocation:
        """Place every instance, in the given order.

        Args:
            instances: Part instances, already ordered by the strategy.

        Returns:
            Allocation with placements, unplaceable instances and area totals.
        """
        sheet = FreeRectangleSheet(self.sheet_size)
        allocation = Allocation(sheet_size=self.sheet_size)

        for instance in instances:
            self._allocate_one(sheet, allocation, instance)

        logger.debug(
            "Allocated %d of %d instances onto %d sheet(s)",
            len(allocation.placed),
            len(instances),
            allocation.sheet_count,
        )
        return allocation

    def _allocate_one(
        self,
        sheet: FreeRectangleSheet,
        allocation: Allocation,
        instance: PartInstance,
    ) -> None:
        if not self._fits_empty_sheet(sheet, instance):
            allocation.reject(instance)
            return

        if allocation.sheet_count == 0:
            allocation.open_sheet()

        order = self._orientation_order(instance)
        fresh = sheet.is_empty
        found = self._search(sheet, instance, order, fresh_sheet=fresh)

        if found is None and not fresh:
            allocation.open_sheet()
            sheet.reset()
            logger.debug(
                "Opened sheet %d for part '%s'", allocation.sheet_index, instance.id
            )
            found = self._search(sheet, instance, order, fresh_sheet=True)

        if found is None:
            logger.error(
                "Failed to place part '%s' even on a new sheet", instance.id
            )
            allocation.reject(instance)
            return

        position, violated = found
        length, width = oriented_size(instance.length, instance.width, position.rotated)
        sheet.place(position.rect, position.x, position.y, length, width)
        allocation.record(instance, position.x, position.y, position.rotated, violated)

    def _search(
        self,
        sheet: FreeRectangleSheet,
        instance: PartInstance,
        order: tuple[bool, ...],
        fresh_sheet: bool,
    ) -> tuple[Position, bool] | None:
        """Try legal orientations, then grain violations if the policy allows."""
        for rotated in order:
            length, width = oriented_size(instance.length, instance.width, rotated)
            position = find_position(sheet, length, width, instance.grain, rotated)
            if position is not None:
                return position, False

        violations = violating_orientations(instance.grain)
        if not violations or not self._try_violation(fresh_sheet):
            return None

        for rotated in violations:
            length, width = oriented_size(instance.length, instance.width, rotated)
            position = find_position(sheet, length, width, GrainDirection.NONE, rotated)
            if position is not None:
                return position, True

        return None

    def _try_violation(self, fresh_sheet: bool) -> bool:
        if self.grain_fallback == GrainFallback.NEVER:
            return False
        if self.grain_fallback == GrainFallback.ALWAYS or fresh_sheet:
            return True
        return self._rng.random() < self.violation_probability

    def _orientation_order(self, instance: PartInstance) -> tuple[bool, ...]:
        order = legal_orientations(instance.grain)
        if self.rotation == RotationPolicy.SHUFFLED:
            rotated_first = self._rng.random() > 0.5
            if rotated_first and len(order) == 2:
                return (True, False)
        return order

    def _fits_empty_sheet(
        self,
        sheet: FreeRectangleSheet,
        instance: PartInstance,
    ) -> bool:
        allowed = legal_orientations(instance.grain)
        if self.grain_fallback != GrainFallback.NEVER:
            allowed += violating_orientations(instance.grain)
        return any(
            sheet.fits_empty(*oriented_size(instance.length, instance.width, rotated))
            for rotated in allowed
        )
