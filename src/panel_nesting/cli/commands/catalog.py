"""Catalog commands listing strategies and preset sheet sizes."""

import typer

from panel_nesting.application.strategies import DEFAULT_STRATEGY, StrategyRegistry
from panel_nesting.domain.value_objects import DEFAULT_SHEET_SIZE, SHEET_SIZE_PRESETS


def strategies_command() -> None:
    """List nesting strategies that can be passed to --strategy.

    Example:
        panel-nesting strategies
    """
    registry = StrategyRegistry.with_builtins()
    profiles = registry.profiles()
    width = max(len(name) for name in registry.names())

    typer.echo("Available strategies:")
    typer.echo()
    for profile in profiles:
        marker = " (default)" if profile.key == DEFAULT_STRATEGY else ""
        typer.echo(f"  {profile.key:<{width}}  - {profile.description}{marker}")
    for alias, target in registry.aliases().items():
        typer.echo(f"  {alias:<{width}}  - alias of {target}")


def sheets_command() -> None:
    """List preset stock sheet sizes accepted by --sheet.

    Example:
        panel-nesting sheets
    """
    typer.echo("Preset sheet sizes (length x width, mm):")
    typer.echo()
    for size in SHEET_SIZE_PRESETS:
        marker = " (default)" if size == DEFAULT_SHEET_SIZE else ""
        typer.echo(f"  {size.label}{marker}")
