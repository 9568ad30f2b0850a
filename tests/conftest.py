"""Pytest configuration and shared fixtures for panel nesting tests."""

from __future__ import annotations

import random

import pytest

from panel_nesting.domain.value_objects import (
    GrainDirection,
    PartSpecification,
    SheetSize,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def standard_sheet() -> SheetSize:
    """Create the default 2440x1220 mm sheet."""
    return SheetSize()


@pytest.fixture
def small_sheet() -> SheetSize:
    """Create a 1000x500 mm sheet that fills up quickly."""
    return SheetSize(length=1000.0, width=500.0)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Create a random source with a fixed seed."""
    return random.Random(42)


@pytest.fixture
def kitchen_cutting_list() -> list[PartSpecification]:
    """Create a mixed cutting list covering two materials and every grain."""
    return [
        PartSpecification(
            id="side",
            part_name="Side Panel",
            length=720,
            width=560,
            quantity=4,
            grain=GrainDirection.LENGTH,
            material_type="Plywood",
            thickness=18,
        ),
        PartSpecification(
            id="shelf",
            part_name="Shelf",
            length=564,
            width=540,
            quantity=6,
            grain=GrainDirection.NONE,
            material_type="Plywood",
            thickness=18,
        ),
        PartSpecification(
            id="rail",
            part_name="Top Rail",
            length=564,
            width=100,
            quantity=4,
            grain=GrainDirection.WIDTH,
            material_type="Plywood",
            thickness=18,
        ),
        PartSpecification(
            id="back",
            part_name="Back Panel",
            length=716,
            width=596,
            quantity=2,
            grain=GrainDirection.NONE,
            material_type="Hardboard",
            thickness=6,
        ),
    ]
