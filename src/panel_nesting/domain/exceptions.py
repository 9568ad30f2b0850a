"""Exceptions raised by the nesting engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import UnplacedPart


class NestingError(Exception):
    """Base class for nesting failures."""


class PartTooLargeForSheetError(NestingError):
    """Raised when parts cannot fit on an empty sheet and the caller asked to fail.

    Attributes:
        unplaced: The instances that could not be placed.
    """

    def __init__(self, unplaced: list["UnplacedPart"]) -> None:
        self.unplaced = unplaced
        ids = ", ".join(u.instance_id for u in unplaced)
        super().__init__(
            f"{len(unplaced)} part(s) too large for the stock sheet: {ids}"
        )
