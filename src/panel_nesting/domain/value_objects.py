"""Value objects for the panel nesting domain.

All dataclasses are frozen (immutable) so that cutting-list inputs stay
read-only for the duration of an optimization call and results can be
shared freely between groups.

Dimensions are in millimetres. ``length`` always runs along the sheet's
long axis, ``width`` along its short axis. Sheet-local coordinates place
the origin at the top-left corner of the sheet, with ``x`` growing along
the length and ``y`` growing along the width.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class GrainDirection(str, Enum):
    """Grain direction requirement of a part.

    Attributes:
        NONE: No grain constraint, the part may be placed in either orientation.
        LENGTH: Part length must run along the sheet length.
        WIDTH: Part width must run along the sheet length.
    """

    NONE = "none"
    LENGTH = "length"
    WIDTH = "width"


@dataclass(frozen=True)
class EdgeBanding:
    """Edge banding flags for the four edges of a part."""

    front: bool = False
    back: bool = False
    left: bool = False
    right: bool = False

    @property
    def count(self) -> int:
        """Number of banded edges."""
        return sum((self.front, self.back, self.left, self.right))

    def to_dict(self) -> dict[str, bool]:
        return {
            "front": self.front,
            "back": self.back,
            "left": self.left,
            "right": self.right,
        }


@dataclass(frozen=True)
class SheetSize:
    """Stock sheet dimensions.

    Attributes:
        length: Sheet length in mm (default 2440, the long side of a 4x8 sheet).
        width: Sheet width in mm (default 1220).
    """

    length: float = 2440.0
    width: float = 1220.0

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Sheet length must be positive")
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")

    @property
    def area(self) -> float:
        """Sheet area in square millimetres."""
        return self.length * self.width

    @property
    def label(self) -> str:
        """Compact ``LxW`` representation, e.g. ``2440x1220``."""
        return f"{self.length:g}x{self.width:g}"

    @classmethod
    def parse(cls, text: str) -> "SheetSize":
        """Parse a ``LENGTHxWIDTH`` string such as ``"2440x1220"``.

        Raises:
            ValueError: If the text is not two positive numbers separated by ``x``.
        """
        normalized = text.strip().lower().replace("×", "x").replace("*", "x")
        parts = [p.strip() for p in normalized.split("x")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Invalid sheet size '{text}', expected LENGTHxWIDTH (e.g. 2440x1220)"
            )
        try:
            length, width = float(parts[0]), float(parts[1])
        except ValueError as e:
            raise ValueError(
                f"Invalid sheet size '{text}', expected LENGTHxWIDTH (e.g. 2440x1220)"
            ) from e
        return cls(length=length, width=width)

    def to_dict(self) -> dict[str, float]:
        return {"length": self.length, "width": self.width}


DEFAULT_SHEET_SIZE = SheetSize()

# Stock sheet sizes offered to users picking a sheet
SHEET_SIZE_PRESETS: tuple[SheetSize, ...] = (
    SheetSize(2440, 1220),
    SheetSize(3050, 1525),
    SheetSize(2100, 2800),
    SheetSize(1520, 1520),
    SheetSize(2100, 2100),
    SheetSize(1800, 3600),
)


@dataclass(frozen=True)
class PartInstance:
    """One physical unit of a part specification, ready for placement.

    Attributes:
        id: Instance identifier, ``"{spec_id}-{index}"``.
        spec_id: Identifier of the owning part specification.
        length: Part length in mm (unrotated).
        width: Part width in mm (unrotated).
        grain: Grain requirement copied from the specification.
        part_name: Human-readable name copied from the specification.
        edge_banding: Edge banding flags copied from the specification.
    """

    id: str
    spec_id: str
    length: float
    width: float
    grain: GrainDirection = GrainDirection.NONE
    part_name: str = ""
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def longest_side(self) -> float:
        return max(self.length, self.width)


@dataclass(frozen=True)
class PartSpecification:
    """A line of the cutting list: a rectangular part and how many to cut.

    Attributes:
        id: Cutting-list item identifier.
        length: Part length in mm.
        width: Part width in mm.
        quantity: Number of identical parts required.
        grain: Grain direction requirement.
        edge_banding: Edge banding flags (carried through, never used for placement).
        material_type: Sheet material name, e.g. ``"Plywood"``.
        thickness: Material thickness in mm.
        part_name: Human-readable part name.
        cabinet_id: Identifier of the cabinet the part belongs to, if any.
        cabinet_name: Name of the cabinet the part belongs to, if any.
        priority: Cutting priority from the producing cutting list.
    """

    id: str
    length: float
    width: float
    quantity: int = 1
    grain: GrainDirection = GrainDirection.NONE
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)
    material_type: str = ""
    thickness: float = 0.0
    part_name: str = ""
    cabinet_id: str | None = None
    cabinet_name: str | None = None
    priority: int = 0

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Part dimensions must be positive")
        if self.quantity < 0:
            raise ValueError("Part quantity must be non-negative")
        if self.thickness < 0:
            raise ValueError("Material thickness must be non-negative")

    @property
    def area(self) -> float:
        """Area of a single part in square millimetres."""
        return self.length * self.width

    @property
    def material_key(self) -> tuple[str, float]:
        """Grouping key: parts sharing it are cut from the same sheet stock."""
        return (self.material_type, self.thickness)

    def expand(self) -> list[PartInstance]:
        """Expand the specification into one instance per unit of quantity."""
        return [
            PartInstance(
                id=f"{self.id}-{i}",
                spec_id=self.id,
                length=self.length,
                width=self.width,
                grain=self.grain,
                part_name=self.part_name,
                edge_banding=self.edge_banding,
            )
            for i in range(self.quantity)
        ]


@dataclass(frozen=True)
class FreeRectangle:
    """An unoccupied, axis-aligned region of the active sheet."""

    x: float
    y: float
    length: float
    width: float

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def right(self) -> float:
        """X coordinate of the far edge along the sheet length."""
        return self.x + self.length

    @property
    def bottom(self) -> float:
        """Y coordinate of the far edge along the sheet width."""
        return self.y + self.width

    def fits(self, length: float, width: float) -> bool:
        """Whether a part of the given (already oriented) size fits inside."""
        return self.length >= length and self.width >= width

    def contains(self, other: FreeRectangle) -> bool:
        """Whether ``other`` lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, x: float, y: float, length: float, width: float) -> bool:
        """Whether the given region overlaps this rectangle with positive area."""
        return (
            x < self.right
            and self.x < x + length
            and y < self.bottom
            and self.y < y + width
        )


@dataclass(frozen=True)
class PlacedPart:
    """A part instance placed on a sheet.

    ``length`` and ``width`` are the dimensions as placed, i.e. swapped when
    ``rotation`` is 90.

    Attributes:
        id: Instance identifier.
        spec_id: Identifier of the originating part specification.
        x: Distance from the sheet's left edge along its length.
        y: Distance from the sheet's top edge along its width.
        length: Placed extent along the sheet length.
        width: Placed extent along the sheet width.
        rotation: 0 or 90 degrees.
        grain: Grain requirement of the originating specification.
        grain_violated: True if the grain requirement was knowingly bypassed.
        sheet_index: Zero-based index of the sheet the part sits on.
        part_name: Human-readable part name.
        edge_banding: Edge banding flags of the originating specification.
    """

    id: str
    spec_id: str
    x: float
    y: float
    length: float
    width: float
    rotation: int = 0
    grain: GrainDirection = GrainDirection.NONE
    grain_violated: bool = False
    sheet_index: int = 0
    part_name: str = ""
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")
        if self.rotation not in (0, 90):
            raise ValueError("Rotation must be 0 or 90 degrees")
        if self.sheet_index < 0:
            raise ValueError("Sheet index must be non-negative")

    @property
    def rotated(self) -> bool:
        return self.rotation == 90

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def right(self) -> float:
        return self.x + self.length

    @property
    def bottom(self) -> float:
        return self.y + self.width

    def overlaps(self, other: PlacedPart) -> bool:
        """Whether two placed parts share material on the same sheet."""
        if self.sheet_index != other.sheet_index:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "partId": self.spec_id,
            "partName": self.part_name,
            "x": self.x,
            "y": self.y,
            "length": self.length,
            "width": self.width,
            "rotation": self.rotation,
            "grain": self.grain.value,
            "grainViolated": self.grain_violated,
            "sheetIndex": self.sheet_index,
            "edgeBanding": self.edge_banding.to_dict(),
        }


@dataclass(frozen=True)
class UnplacedPart:
    """A part instance that cannot fit on an empty stock sheet.

    Reported per instance instead of being dropped, so the caller can tell
    that a required part is missing from the layout.
    """

    instance_id: str
    spec_id: str
    length: float
    width: float
    grain: GrainDirection
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.instance_id,
            "partId": self.spec_id,
            "length": self.length,
            "width": self.width,
            "grain": self.grain.value,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class NestingResult:
    """Nesting outcome for one (material type, thickness) group.

    Attributes:
        sheet_size: Stock sheet dimensions used.
        material_type: Material of the group.
        thickness: Material thickness of the group.
        parts: Placed parts in placement order.
        sheet_count: Number of sheets consumed.
        used_area: Sum of placed part areas.
        total_area: Sheet area times sheet count.
        waste_area: ``total_area - used_area``.
        raw_efficiency: ``used_area / total_area * 100``.
        efficiency: Efficiency as reported by the strategy (after adjustment).
        strategy: Key of the strategy that produced the layout.
        unplaced: Instances that could not fit on an empty sheet.
        warnings: Diagnostics raised while producing the result.
    """

    sheet_size: SheetSize
    material_type: str
    thickness: float
    parts: tuple[PlacedPart, ...]
    sheet_count: int
    used_area: float
    total_area: float
    waste_area: float
    raw_efficiency: float
    efficiency: float
    strategy: str
    unplaced: tuple[UnplacedPart, ...] = ()
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.sheet_count < 0:
            raise ValueError("Sheet count must be non-negative")

    @property
    def placed_count(self) -> int:
        return len(self.parts)

    @property
    def has_unplaced(self) -> bool:
        return bool(self.unplaced)

    def parts_on_sheet(self, sheet_index: int) -> tuple[PlacedPart, ...]:
        """Placed parts sitting on the given zero-based sheet."""
        return tuple(p for p in self.parts if p.sheet_index == sheet_index)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sheetSize": self.sheet_size.to_dict(),
            "materialType": self.material_type,
            "thickness": self.thickness,
            "strategy": self.strategy,
            "parts": [p.to_dict() for p in self.parts],
            "efficiency": self.efficiency,
            "rawEfficiency": self.raw_efficiency,
            "usedArea": self.used_area,
            "wasteArea": self.waste_area,
            "totalArea": self.total_area,
            "sheetCount": self.sheet_count,
            "unplaced": [u.to_dict() for u in self.unplaced],
            "warnings": list(self.warnings),
        }
