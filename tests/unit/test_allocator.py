"""Tests for grain policy and the multi-sheet free-rectangle allocator.

Tests cover:
- Legal and violating orientations per grain direction
- Lazy sheet opening and overflow onto new sheets
- Grain fallback policies (never, always, probabilistic)
- Parts too large for an empty sheet
- Layout validity for seeded shuffled rotation
"""

from __future__ import annotations

import random

import pytest

from panel_nesting.domain.value_objects import (
    GrainDirection,
    PartInstance,
    PlacedPart,
    SheetSize,
)
from panel_nesting.infrastructure.nesting import (
    Allocation,
    GrainFallback,
    RotationPolicy,
    SheetAllocator,
    is_orientation_legal,
    legal_orientations,
    oriented_size,
    primary_orientation,
    satisfies_grain,
    violating_orientations,
)


def _instance(
    id: str,
    length: float,
    width: float,
    grain: GrainDirection = GrainDirection.NONE,
) -> PartInstance:
    return PartInstance(id=id, spec_id=id.rsplit("-", 1)[0], length=length, width=width, grain=grain)


class _FixedDraw(random.Random):
    """Random source whose every draw returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def _assert_valid_layout(parts: list[PlacedPart], sheet_size: SheetSize) -> None:
    for part in parts:
        assert part.x >= 0 and part.y >= 0
        assert part.right <= sheet_size.length
        assert part.bottom <= sheet_size.width
    for i, first in enumerate(parts):
        for second in parts[i + 1 :]:
            assert not first.overlaps(second), (first, second)


# =============================================================================
# Grain Policy Tests
# =============================================================================


class TestGrainPolicy:
    """Tests for orientation legality."""

    @pytest.mark.parametrize(
        "grain,legal,violating",
        [
            (GrainDirection.NONE, (False, True), ()),
            (GrainDirection.LENGTH, (False,), (True,)),
            (GrainDirection.WIDTH, (True,), (False,)),
        ],
    )
    def test_orientations(
        self,
        grain: GrainDirection,
        legal: tuple[bool, ...],
        violating: tuple[bool, ...],
    ) -> None:
        """Each grain allows exactly its legal orientations."""
        assert legal_orientations(grain) == legal
        assert violating_orientations(grain) == violating
        assert primary_orientation(grain) == legal[0]
        for rotated in legal:
            assert is_orientation_legal(grain, rotated)
        for rotated in violating:
            assert not is_orientation_legal(grain, rotated)

    def test_oriented_size_swaps_when_rotated(self) -> None:
        """Rotation swaps the extents along the sheet."""
        assert oriented_size(600, 400, False) == (600, 400)
        assert oriented_size(600, 400, True) == (400, 600)

    def test_satisfies_grain(self) -> None:
        """Placed parts are checked against their final orientation."""
        rotated = PlacedPart(
            id="a-0", spec_id="a", x=0, y=0, length=50, width=100,
            rotation=90, grain=GrainDirection.LENGTH, grain_violated=True,
        )
        assert not satisfies_grain(rotated)
        assert satisfies_grain(
            PlacedPart(
                id="b-0", spec_id="b", x=0, y=0, length=50, width=100,
                rotation=90, grain=GrainDirection.WIDTH,
            )
        )


# =============================================================================
# Sheet Allocator Tests
# =============================================================================


class TestSheetAllocator:
    """Tests for SheetAllocator."""

    def test_empty_input_opens_no_sheet(self, standard_sheet: SheetSize) -> None:
        """No instances means no sheets and zero efficiency."""
        allocation = SheetAllocator(standard_sheet).allocate([])

        assert allocation.sheet_count == 0
        assert allocation.total_area == 0
        assert allocation.efficiency == 0.0

    def test_strip_and_panels_share_one_sheet(self, standard_sheet: SheetSize) -> None:
        """A full-length strip plus two 600x400 panels fit one sheet."""
        instances = [
            _instance("strip-0", 2440, 100, GrainDirection.LENGTH),
            _instance("panel-0", 600, 400),
            _instance("panel-1", 600, 400),
        ]

        allocation = SheetAllocator(standard_sheet).allocate(instances)

        assert allocation.sheet_count == 1
        strip = allocation.placed[0]
        assert (strip.x, strip.y, strip.rotation) == (0, 0, 0)
        assert allocation.used_area == 2440 * 100 + 2 * 600 * 400
        assert allocation.efficiency == pytest.approx(
            allocation.used_area / standard_sheet.area * 100
        )
        _assert_valid_layout(allocation.placed, standard_sheet)

    def test_overflow_opens_new_sheets(self, small_sheet: SheetSize) -> None:
        """Sheet-sized parts each take a sheet of their own."""
        instances = [_instance(f"full-{i}", 1000, 500) for i in range(3)]

        allocation = SheetAllocator(small_sheet).allocate(instances)

        assert allocation.sheet_count == 3
        assert [p.sheet_index for p in allocation.placed] == [0, 1, 2]
        assert allocation.efficiency == pytest.approx(100.0)
        assert allocation.waste_area == pytest.approx(0.0)

    def test_parts_never_return_to_earlier_sheet(self, small_sheet: SheetSize) -> None:
        """Once a sheet is closed later parts only go on the active sheet."""
        instances = [
            _instance("a-0", 900, 500),
            _instance("b-0", 1000, 500),
            _instance("c-0", 100, 100),
        ]

        allocation = SheetAllocator(small_sheet).allocate(instances)

        assert allocation.sheet_count == 3
        assert allocation.placed[2].sheet_index == 2

    def test_grain_free_part_rotates_to_fit(self, small_sheet: SheetSize) -> None:
        """A part too wide unrotated is placed rotated when grain allows."""
        allocation = SheetAllocator(small_sheet).allocate([_instance("a-0", 400, 800)])

        part = allocation.placed[0]
        assert part.rotation == 90
        assert (part.length, part.width) == (800, 400)
        assert not part.grain_violated
        assert allocation.used_area == 400 * 800

    def test_width_grain_is_placed_rotated(self, small_sheet: SheetSize) -> None:
        """WIDTH grain parts always take the rotated orientation."""
        allocation = SheetAllocator(small_sheet).allocate(
            [_instance("rail-0", 300, 100, GrainDirection.WIDTH)]
        )

        part = allocation.placed[0]
        assert part.rotated
        assert (part.length, part.width) == (100, 300)
        assert satisfies_grain(part)

    def test_grain_locked_part_too_large_is_unplaced(self, small_sheet: SheetSize) -> None:
        """Without fallback a part fitting only against its grain is reported."""
        allocation = SheetAllocator(small_sheet).allocate(
            [_instance("tall-0", 400, 800, GrainDirection.LENGTH)]
        )

        assert allocation.placed == []
        assert allocation.sheet_count == 0
        assert len(allocation.unplaced) == 1
        unplaced = allocation.unplaced[0]
        assert unplaced.instance_id == "tall-0"
        assert "1000x500" in unplaced.reason

    def test_always_fallback_violates_grain(self, small_sheet: SheetSize) -> None:
        """ALWAYS fallback places the part rotated and flags the violation."""
        allocator = SheetAllocator(small_sheet, grain_fallback=GrainFallback.ALWAYS)
        allocation = allocator.allocate([_instance("tall-0", 400, 800, GrainDirection.LENGTH)])

        part = allocation.placed[0]
        assert part.rotated
        assert part.grain_violated
        assert not satisfies_grain(part)
        assert allocation.sheet_count == 1

    def test_fallback_prefers_legal_orientation(self, small_sheet: SheetSize) -> None:
        """Grain is only violated when no legal orientation fits."""
        allocator = SheetAllocator(small_sheet, grain_fallback=GrainFallback.ALWAYS)
        allocation = allocator.allocate([_instance("a-0", 300, 200, GrainDirection.LENGTH)])

        assert not allocation.placed[0].grain_violated
        assert not allocation.placed[0].rotated

    @pytest.mark.parametrize("seed", range(10))
    def test_probabilistic_fallback_never_wastes_first_sheet(
        self, small_sheet: SheetSize, seed: int
    ) -> None:
        """An empty active sheet is treated as fresh, so no empty sheet is counted."""
        allocator = SheetAllocator(
            small_sheet,
            grain_fallback=GrainFallback.PROBABILISTIC,
            rng=random.Random(seed),
        )
        allocation = allocator.allocate([_instance("tall-0", 400, 800, GrainDirection.LENGTH)])

        assert allocation.sheet_count == 1
        assert allocation.placed[0].grain_violated

    def _probabilistic_on_partial_sheet(
        self, small_sheet: SheetSize, draw: float
    ) -> Allocation:
        """Fill the top of the sheet, then place a part that only fits the rest rotated."""
        allocator = SheetAllocator(
            small_sheet,
            grain_fallback=GrainFallback.PROBABILISTIC,
            rng=_FixedDraw(draw),
        )
        return allocator.allocate(
            [
                _instance("top-0", 1000, 100),
                _instance("door-0", 300, 450, GrainDirection.LENGTH),
            ]
        )

    def test_probabilistic_violation_accepted_on_active_sheet(
        self, small_sheet: SheetSize
    ) -> None:
        """A draw under the probability violates grain on the active sheet."""
        allocation = self._probabilistic_on_partial_sheet(small_sheet, draw=0.0)

        door = allocation.placed[1]
        assert allocation.sheet_count == 1
        assert door.sheet_index == 0
        assert door.rotated
        assert door.grain_violated
        assert (door.x, door.y) == (0, 100)

    def test_probabilistic_violation_declined_opens_sheet(
        self, small_sheet: SheetSize
    ) -> None:
        """A draw over the probability moves the part to a new sheet with its grain kept."""
        allocation = self._probabilistic_on_partial_sheet(small_sheet, draw=0.99)

        door = allocation.placed[1]
        assert allocation.sheet_count == 2
        assert door.sheet_index == 1
        assert (door.x, door.y) == (0, 0)
        assert not door.rotated
        assert not door.grain_violated

    def test_oversized_part_skipped_without_sheet(self, small_sheet: SheetSize) -> None:
        """Oversized parts are reported and the remaining parts still place."""
        instances = [_instance("huge-0", 3000, 100), _instance("ok-0", 100, 100)]

        allocation = SheetAllocator(small_sheet).allocate(instances)

        assert [u.instance_id for u in allocation.unplaced] == ["huge-0"]
        assert [p.id for p in allocation.placed] == ["ok-0"]
        assert allocation.sheet_count == 1

    def test_rejects_invalid_probability(self, small_sheet: SheetSize) -> None:
        """Violation probability must lie in [0, 1]."""
        with pytest.raises(ValueError):
            SheetAllocator(small_sheet, violation_probability=1.5)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_shuffled_rotation_produces_valid_layout(
        self, standard_sheet: SheetSize, seed: int
    ) -> None:
        """Random orientation order still yields a non-overlapping layout."""
        rng = random.Random(seed)
        instances = [
            _instance(f"p{i}-0", rng.choice([300, 450, 720]), rng.choice([200, 350, 560]))
            for i in range(25)
        ]
        allocator = SheetAllocator(
            standard_sheet,
            rotation=RotationPolicy.SHUFFLED,
            grain_fallback=GrainFallback.PROBABILISTIC,
            rng=random.Random(seed),
        )

        allocation = allocator.allocate(instances)

        assert len(allocation.placed) == 25
        assert allocation.used_area == pytest.approx(sum(i.area for i in instances))
        for index in range(allocation.sheet_count):
            _assert_valid_layout(
                [p for p in allocation.placed if p.sheet_index == index], standard_sheet
            )

    def test_same_seed_same_layout(self, standard_sheet: SheetSize) -> None:
        """Seeded random sources reproduce the layout exactly."""
        instances = [_instance(f"p{i}-0", 300 + i * 10, 200) for i in range(12)]

        def run(seed: int) -> list[PlacedPart]:
            allocator = SheetAllocator(
                standard_sheet,
                rotation=RotationPolicy.SHUFFLED,
                rng=random.Random(seed),
            )
            return allocator.allocate(instances).placed

        assert run(7) == run(7)
