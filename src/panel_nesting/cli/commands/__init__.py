"""CLI command implementations for the panel nesting application.

This package contains subcommands for the panel-nesting CLI, including:
- strategies: List the strategies that can be requested by name
- sheets: List preset stock sheet sizes
"""

from panel_nesting.cli.commands.catalog import sheets_command, strategies_command

__all__ = ["sheets_command", "strategies_command"]
