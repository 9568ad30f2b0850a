"""Tests for the nesting report formatter and JSON exporter."""

from __future__ import annotations

import json

import pytest

from panel_nesting.application import NestingService
from panel_nesting.domain.value_objects import (
    GrainDirection,
    NestingResult,
    PartSpecification,
)
from panel_nesting.infrastructure import NestingJsonExporter, NestingReportFormatter


@pytest.fixture
def results() -> list[NestingResult]:
    """Results for one plywood group with an oversized part."""
    return NestingService().optimize(
        [
            PartSpecification(
                id="side",
                part_name="Side",
                length=720,
                width=560,
                quantity=2,
                grain=GrainDirection.LENGTH,
                material_type="Plywood",
                thickness=18,
            ),
            PartSpecification(
                id="beam",
                length=3000,
                width=100,
                material_type="Plywood",
                thickness=18,
            ),
        ]
    )


@pytest.fixture
def violated_results() -> list[NestingResult]:
    """Results containing a grain-violating placement."""
    return NestingService().optimize(
        [
            PartSpecification(
                id="tall",
                length=1000,
                width=2000,
                grain=GrainDirection.LENGTH,
                material_type="MDF",
                thickness=16,
            )
        ],
        strategy="binpacking",
    )


class TestNestingReportFormatter:
    """Tests for NestingReportFormatter."""

    def test_empty_results(self) -> None:
        """No results produce a short notice."""
        assert NestingReportFormatter().format([]) == "No parts to nest."

    def test_summary_block(self, results: list[NestingResult]) -> None:
        """Each group gets a titled summary."""
        output = NestingReportFormatter().format(results)

        assert "NESTING: Plywood 18mm" in output
        assert "Strategy:    rectpack2d" in output
        assert "Sheet size:  2440x1220 mm" in output
        assert "Sheets:      1" in output
        assert "Parts:       2" in output

    def test_placement_table(self, results: list[NestingResult]) -> None:
        """Placed parts are listed with their positions."""
        output = NestingReportFormatter().format(results)
        assert "side-0" in output
        assert "side-1" in output

    def test_hide_placements(self, results: list[NestingResult]) -> None:
        """The placement table can be turned off."""
        output = NestingReportFormatter(show_placements=False).format(results)
        assert "side-0" not in output

    def test_unplaced_section(self, results: list[NestingResult]) -> None:
        """Unplaced parts are listed with their reason."""
        output = NestingReportFormatter().format(results)

        assert "UNPLACED (too large for sheet):" in output
        assert "beam-0: 3000x100 exceeds sheet 2440x1220" in output
        assert output.endswith("TOTAL: 1 sheet(s), 2 part(s) placed, 1 unplaced")

    def test_violation_marker(self, violated_results: list[NestingResult]) -> None:
        """Grain violations are marked in the table."""
        output = NestingReportFormatter().format(violated_results)
        assert "length (violated)" in output

    def test_unspecified_material_title(self) -> None:
        """Groups without a material get a generic title."""
        results = NestingService().optimize(
            [PartSpecification(id="a", length=100, width=100)]
        )
        output = NestingReportFormatter().format(results)
        assert "NESTING: Unspecified material 0mm" in output


class TestNestingJsonExporter:
    """Tests for NestingJsonExporter."""

    def test_exports_list_of_results(self, results: list[NestingResult]) -> None:
        """Output is a JSON array of result objects."""
        data = json.loads(NestingJsonExporter().export(results))

        assert isinstance(data, list)
        assert len(data) == 1
        result = data[0]
        assert result["materialType"] == "Plywood"
        assert result["sheetCount"] == 1
        assert [p["id"] for p in result["parts"]] == ["side-0", "side-1"]
        assert result["unplaced"][0]["id"] == "beam-0"

    def test_compact_output(self, results: list[NestingResult]) -> None:
        """indent=None gives a single line."""
        output = NestingJsonExporter(indent=None).export(results)
        assert "\n" not in output

    def test_empty(self) -> None:
        """No results export as an empty array."""
        assert json.loads(NestingJsonExporter().export([])) == []
