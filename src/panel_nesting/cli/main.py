"""Typer CLI for panel nesting."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from panel_nesting.application import NestingService
from panel_nesting.application.config import (
    ConfigError,
    config_to_nesting_config,
    config_to_parts,
    load_cutting_list,
)
from panel_nesting.cli.commands import sheets_command, strategies_command
from panel_nesting.domain import PartTooLargeForSheetError, SheetSize
from panel_nesting.infrastructure import NestingJsonExporter, NestingReportFormatter

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="panel-nesting",
    help="Nest cabinet panels from a cutting list onto stock sheets.",
)

app.command(name="strategies")(strategies_command)
app.command(name="sheets")(sheets_command)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, column {detail.get('column', '?')}: "
                f"{detail.get('message', '')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


@app.command()
def optimize(
    cutting_list_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cutting list"),
    ],
    sheet: Annotated[
        str | None,
        typer.Option("--sheet", "-s", help="Sheet size as LENGTHxWIDTH in mm (e.g. 2440x1220)"),
    ] = None,
    material: Annotated[
        str | None,
        typer.Option("--material", "-m", help="Only nest this material ('all' for every material)"),
    ] = None,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-a", help="Nesting strategy (see 'strategies')"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for randomized strategies"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail when any part is too large for the sheet"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log placement decisions"),
    ] = False,
) -> None:
    """Nest a cutting list onto stock sheets.

    Options given on the command line override those stored in the file.

    Exit codes:
        0 - Every part was placed
        1 - Invalid input, or unplaceable parts with --strict
        2 - Layout produced but some parts are too large for the sheet

    Example:
        panel-nesting optimize kitchen.json --sheet 3050x1525 --strategy binpacking
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format: {output_format}. Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        cutting_list = load_cutting_list(cutting_list_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    config = config_to_nesting_config(cutting_list, fail_on_unplaced=strict)
    if seed is not None:
        config = replace(config, seed=seed)
    if sheet is not None:
        try:
            config = replace(config, sheet_size=SheetSize.parse(sheet))
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    service = NestingService(config)
    try:
        results = service.optimize(
            config_to_parts(cutting_list.cutting_list),
            material_filter=material,
            strategy=strategy,
        )
    except PartTooLargeForSheetError as e:
        typer.echo(f"Error: {e}", err=True)
        for unplaced in e.unplaced:
            typer.echo(f"  {unplaced.instance_id}: {unplaced.reason}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        output = NestingJsonExporter().export(results)
    else:
        output = NestingReportFormatter().format(results)

    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(output + "\n", encoding="utf-8")
        typer.echo(f"Nesting written to {output_file}")
    else:
        typer.echo(output)

    # Every group carries the same strategy warnings; report each once
    for warning in dict.fromkeys(w for r in results for w in r.warnings):
        typer.echo(f"Warning: {warning}", err=True)

    unplaced_count = sum(len(r.unplaced) for r in results)
    if unplaced_count:
        typer.echo(
            f"Warning: {unplaced_count} part(s) are too large for the sheet and were not placed",
            err=True,
        )
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
