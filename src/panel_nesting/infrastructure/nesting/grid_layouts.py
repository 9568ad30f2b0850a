"""Simplified layout modes that walk a grid or row strips instead of searching.

These engines never rotate a part to make it fit: each part is laid in the
primary legal orientation for its grain (unrotated, or rotated for WIDTH
grain). Like the free-rectangle allocator they report instances that
cannot fit an empty sheet rather than dropping them.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from panel_nesting.domain.value_objects import PartInstance, SheetSize

from .allocation import Allocation
from .grain import oriented_size, primary_orientation

logger = logging.getLogger(__name__)


def _orient(instance: PartInstance) -> tuple[bool, float, float]:
    rotated = primary_orientation(instance.grain)
    length, width = oriented_size(instance.length, instance.width, rotated)
    return rotated, length, width


class JitteredGridLayout:
    """Coarse grid walk with random jitter; no packing search at all.

    The cell size is the mean longest side of the instances, at least
    ``min_cell``. Each part is dropped at its cell origin shifted by up to
    ``jitter`` mm in each direction and clamped to the sheet. Neighbouring
    parts larger than a cell may overlap; this mode is a visual preview,
    not a cutting layout.
    """

    def __init__(
        self,
        sheet_size: SheetSize,
        rng: random.Random | None = None,
        min_cell: float = 200.0,
        jitter: float = 10.0,
    ) -> None:
        self.sheet_size = sheet_size
        self.min_cell = min_cell
        self.jitter = jitter
        self._rng = rng if rng is not None else random.Random()

    def allocate(self, instances: Sequence[PartInstance]) -> Allocation:
        allocation = Allocation(sheet_size=self.sheet_size)
        if not instances:
            return allocation

        sheet_length = self.sheet_size.length
        sheet_width = self.sheet_size.width
        cell = max(
            sum(i.longest_side for i in instances) / len(instances), self.min_cell
        )
        cols = max(int(sheet_length // cell), 1)
        rows = max(int(sheet_width // cell), 1)
        logger.debug("Jittered grid: %.1f mm cells, %dx%d", cell, cols, rows)

        row = col = 0
        for instance in instances:
            rotated, length, width = _orient(instance)
            if length > sheet_length or width > sheet_width:
                allocation.reject(instance)
                continue
            if allocation.sheet_count == 0:
                allocation.open_sheet()

            if row >= rows:
                allocation.open_sheet()
                row = col = 0

            x, y = self._cell_origin(col, row, cell)
            # The first cell of a sheet is always used; clamping keeps the part on it
            first_cell = col == 0 and row == 0
            if not first_cell and (x + length > sheet_length or y + width > sheet_width):
                col += 1
                if col >= cols:
                    col = 0
                    row += 1
                if row >= rows:
                    allocation.open_sheet()
                    row = col = 0
                x, y = self._cell_origin(col, row, cell)

            x = min(max(x, 0.0), sheet_length - length)
            y = min(max(y, 0.0), sheet_width - width)
            allocation.record(instance, x, y, rotated)

            col += 1
            if col >= cols:
                col = 0
                row += 1

        return allocation

    def _cell_origin(self, col: int, row: int, cell: float) -> tuple[float, float]:
        return (
            col * cell + self._rng.uniform(-self.jitter, self.jitter),
            row * cell + self._rng.uniform(-self.jitter, self.jitter),
        )


class StripLayout:
    """Fills the sheet in horizontal row strips, left to right.

    A row is as tall as its widest part. When a part does not fit the rest
    of the row a new row starts below; when the row does not fit the sheet
    a new sheet starts.
    """

    def __init__(self, sheet_size: SheetSize) -> None:
        self.sheet_size = sheet_size

    def allocate(self, instances: Sequence[PartInstance]) -> Allocation:
        allocation = Allocation(sheet_size=self.sheet_size)
        sheet_length = self.sheet_size.length
        sheet_width = self.sheet_size.width

        x = y = row_height = 0.0
        for instance in instances:
            rotated, length, width = _orient(instance)
            if length > sheet_length or width > sheet_width:
                allocation.reject(instance)
                continue
            if allocation.sheet_count == 0:
                allocation.open_sheet()

            if x + length > sheet_length:
                x = 0.0
                y += row_height
                row_height = 0.0

            if y + width > sheet_width:
                allocation.open_sheet()
                x = y = row_height = 0.0

            allocation.record(instance, x, y, rotated)
            x += length
            row_height = max(row_height, width)

        return allocation


class CellGridLayout:
    """Row strips snapped to a fixed square cell grid.

    Each part occupies ``ceil(extent / cell)`` cells in each direction and
    starts on a cell boundary. Rows advance by the tallest span in the row.
    """

    def __init__(self, sheet_size: SheetSize, cell: float = 100.0) -> None:
        if cell <= 0:
            raise ValueError("Grid cell size must be positive")
        self.sheet_size = sheet_size
        self.cell = cell

    def allocate(self, instances: Sequence[PartInstance]) -> Allocation:
        allocation = Allocation(sheet_size=self.sheet_size)
        sheet_length = self.sheet_size.length
        sheet_width = self.sheet_size.width
        cell = self.cell

        col = row = row_span = 0
        for instance in instances:
            rotated, length, width = _orient(instance)
            if length > sheet_length or width > sheet_width:
                allocation.reject(instance)
                continue
            if allocation.sheet_count == 0:
                allocation.open_sheet()

            col_span = math.ceil(length / cell)
            part_row_span = math.ceil(width / cell)

            if col * cell + length > sheet_length:
                col = 0
                row += row_span
                row_span = 0

            if row * cell + width > sheet_width:
                allocation.open_sheet()
                col = row = row_span = 0

            allocation.record(instance, col * cell, row * cell, rotated)
            col += col_span
            row_span = max(row_span, part_row_span)

        return allocation
