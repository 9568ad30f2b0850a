"""Layout engine protocol.

Every strategy ends up driving a layout engine: the free-rectangle
``SheetAllocator`` or one of the simplified grid/strip layouts. The
protocol lets the nesting service and tests treat them interchangeably.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from panel_nesting.domain.value_objects import PartInstance
    from panel_nesting.infrastructure.nesting.allocation import Allocation


@runtime_checkable
class LayoutEngine(Protocol):
    """Places ordered part instances onto one or more sheets.

    Example:
        ```python
        class MyLayout:
            def allocate(self, instances: Sequence[PartInstance]) -> Allocation:
                allocation = Allocation(sheet_size=self.sheet_size)
                ...
                return allocation
        ```
    """

    def allocate(self, instances: Sequence["PartInstance"]) -> "Allocation":
        """Place every instance in order.

        Args:
            instances: Part instances, already ordered by the strategy.

        Returns:
            Allocation holding placements, unplaceable instances and areas.
        """
        ...


__all__ = [
    "LayoutEngine",
]
