"""Free-rectangle bookkeeping for the active stock sheet.

The sheet is represented by the list of rectangular regions still available
for placement. Placing a part performs a guillotine split of the winning
region into a right strip and a bottom strip. The two strips may overlap
each other; containment pruning removes regions that are fully dominated
by a larger one, but overlapping, non-containing regions stay in the list.
"""

from __future__ import annotations

import logging

from panel_nesting.domain.value_objects import FreeRectangle, SheetSize

logger = logging.getLogger(__name__)


class FreeRectangleSheet:
    """Mutable free-space model of the sheet currently being filled.

    Attributes:
        sheet_size: Dimensions of the stock sheet.
        free_rectangles: Regions available for placement, largest first
            after every prune.
    """

    def __init__(self, sheet_size: SheetSize) -> None:
        self.sheet_size = sheet_size
        self.free_rectangles: list[FreeRectangle] = []
        self.reset()

    def reset(self) -> None:
        """Replace the free space with a single rectangle spanning the sheet."""
        self.free_rectangles = [
            FreeRectangle(
                x=0.0,
                y=0.0,
                length=self.sheet_size.length,
                width=self.sheet_size.width,
            )
        ]

    def fits_empty(self, length: float, width: float) -> bool:
        """Whether a part of the given orientation fits an empty sheet."""
        return length <= self.sheet_size.length and width <= self.sheet_size.width

    def split(
        self,
        rect: FreeRectangle,
        x: float,
        y: float,
        part_length: float,
        part_width: float,
    ) -> None:
        """Consume the area of a part placed at ``(x, y)`` inside ``rect``.

        ``rect`` is replaced by a right strip (full ``rect.width``) and a
        bottom strip (full ``rect.length``) where area remains. Any other
        free rectangle covering part of the placed region is clipped so no
        free rectangle ever overlaps placed material.

        Args:
            rect: The free rectangle the part was placed into.
            x: Placement x coordinate.
            y: Placement y coordinate.
            part_length: Placed extent along the sheet length.
            part_width: Placed extent along the sheet width.
        """
        remaining = [r for r in self.free_rectangles if r is not rect]
        if len(remaining) == len(self.free_rectangles):
            raise ValueError("Rectangle is not part of this sheet's free space")

        emitted: list[FreeRectangle] = []

        # Right of the part
        if rect.right > x + part_length:
            emitted.append(
                FreeRectangle(
                    x=x + part_length,
                    y=rect.y,
                    length=rect.right - (x + part_length),
                    width=rect.width,
                )
            )

        # Below the part
        if rect.bottom > y + part_width:
            emitted.append(
                FreeRectangle(
                    x=rect.x,
                    y=y + part_width,
                    length=rect.length,
                    width=rect.bottom - (y + part_width),
                )
            )

        clipped: list[FreeRectangle] = []
        for other in remaining:
            if other.intersects(x, y, part_length, part_width):
                clipped.extend(_clip(other, x, y, part_length, part_width))
            else:
                clipped.append(other)

        self.free_rectangles = clipped + emitted

    def prune(self) -> None:
        """Drop free rectangles fully contained within another one.

        Rectangles are sorted by descending area first (stable, so equal
        areas keep their current order); each rectangle then removes every
        later one it contains.
        """
        rects = sorted(
            (r for r in self.free_rectangles if r.length > 0 and r.width > 0),
            key=lambda r: r.area,
            reverse=True,
        )
        removed = [False] * len(rects)

        for i, outer in enumerate(rects):
            if removed[i]:
                continue
            for j in range(i + 1, len(rects)):
                if not removed[j] and outer.contains(rects[j]):
                    removed[j] = True

        self.free_rectangles = [r for r, gone in zip(rects, removed) if not gone]

    def place(
        self,
        rect: FreeRectangle,
        x: float,
        y: float,
        part_length: float,
        part_width: float,
    ) -> None:
        """Split ``rect`` around a placed part, then prune the free space."""
        self.split(rect, x, y, part_length, part_width)
        self.prune()
        logger.debug(
            "Placed %sx%s at (%s, %s), %d free rectangles remain",
            part_length,
            part_width,
            x,
            y,
            len(self.free_rectangles),
        )

    @property
    def is_empty(self) -> bool:
        """Whether nothing has been placed since the last reset."""
        return (
            len(self.free_rectangles) == 1
            and self.free_rectangles[0].area == self.sheet_size.area
        )

    @property
    def free_area(self) -> float:
        """Sum of free rectangle areas (overlapping regions counted twice)."""
        return sum(r.area for r in self.free_rectangles)


def _clip(
    rect: FreeRectangle,
    x: float,
    y: float,
    length: float,
    width: float,
) -> list[FreeRectangle]:
    """Maximal sub-rectangles of ``rect`` lying outside the given region."""
    pieces: list[FreeRectangle] = []

    if x > rect.x:
        pieces.append(FreeRectangle(rect.x, rect.y, x - rect.x, rect.width))
    if x + length < rect.right:
        pieces.append(
            FreeRectangle(x + length, rect.y, rect.right - (x + length), rect.width)
        )
    if y > rect.y:
        pieces.append(FreeRectangle(rect.x, rect.y, rect.length, y - rect.y))
    if y + width < rect.bottom:
        pieces.append(
            FreeRectangle(rect.x, y + width, rect.length, rect.bottom - (y + width))
        )

    return pieces
