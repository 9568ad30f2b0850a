"""Output formatters for nesting results."""

from __future__ import annotations

import json
from typing import Sequence

from panel_nesting.domain.value_objects import NestingResult


class NestingReportFormatter:
    """Formats nesting results as plain-text tables, one block per material group."""

    def __init__(self, show_placements: bool = True) -> None:
        """Initialize formatter.

        Args:
            show_placements: Whether to list every placed part under each summary.
        """
        self._show_placements = show_placements

    def format(self, results: Sequence[NestingResult]) -> str:
        if not results:
            return "No parts to nest."

        blocks = [self._format_result(result) for result in results]
        blocks.append(self._format_totals(results))
        return "\n\n".join(blocks)

    def _format_result(self, result: NestingResult) -> str:
        title = f"{result.material_type or 'Unspecified material'} {result.thickness:g}mm"
        lines = [
            f"NESTING: {title}",
            "=" * 78,
            f"Strategy:    {result.strategy}",
            f"Sheet size:  {result.sheet_size.label} mm",
            f"Sheets:      {result.sheet_count}",
            f"Parts:       {result.placed_count}",
            f"Efficiency:  {result.efficiency:.1f}%",
            f"Waste area:  {result.waste_area / 1_000_000:.3f} m²",
        ]

        for warning in result.warnings:
            lines.append(f"Warning:     {warning}")

        if self._show_placements and result.parts:
            lines.extend(
                [
                    "-" * 78,
                    f"{'Sheet':<6} {'Part':<22} {'X':>8} {'Y':>8} "
                    f"{'Length':>8} {'Width':>8} {'Rot':>4}  Grain",
                    "-" * 78,
                ]
            )
            for part in result.parts:
                grain = part.grain.value
                if part.grain_violated:
                    grain += " (violated)"
                lines.append(
                    f"{part.sheet_index + 1:<6} {part.id:<22} {part.x:>8.1f} "
                    f"{part.y:>8.1f} {part.length:>8.1f} {part.width:>8.1f} "
                    f"{part.rotation:>4}  {grain}"
                )

        if result.unplaced:
            lines.append("-" * 78)
            lines.append("UNPLACED (too large for sheet):")
            for unplaced in result.unplaced:
                lines.append(f"  {unplaced.instance_id}: {unplaced.reason}")

        return "\n".join(lines)

    def _format_totals(self, results: Sequence[NestingResult]) -> str:
        sheets = sum(r.sheet_count for r in results)
        parts = sum(r.placed_count for r in results)
        unplaced = sum(len(r.unplaced) for r in results)
        line = f"TOTAL: {sheets} sheet(s), {parts} part(s) placed"
        if unplaced:
            line += f", {unplaced} unplaced"
        return line


class NestingJsonExporter:
    """Exports nesting results as a JSON array of result objects."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def export(self, results: Sequence[NestingResult]) -> str:
        return json.dumps([r.to_dict() for r in results], indent=self._indent)
