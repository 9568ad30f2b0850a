"""Cutting-list loading and nesting option configuration.

Public API:
    - CuttingListFileSchema: Root model of a cutting-list file
    - CuttingListItemSchema: One cutting-list line
    - NestingOptionsSchema: Sheet size, material filter, strategy and seed
    - load_cutting_list: Load a cutting list from a JSON file
    - load_cutting_list_from_dict: Load a cutting list from parsed JSON
    - ConfigError: Exception for loading errors
    - config_to_parts: Convert items to domain part specifications
    - config_to_nesting_config: Convert options to a NestingConfig

Example:
    >>> from pathlib import Path
    >>> from panel_nesting.application.config import load_cutting_list, ConfigError
    >>>
    >>> try:
    ...     cutting_list = load_cutting_list(Path("kitchen.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from panel_nesting.application.config.adapter import (
    config_to_nesting_config,
    config_to_parts,
    config_to_sheet_size,
    item_to_part,
)
from panel_nesting.application.config.loader import (
    ConfigError,
    load_cutting_list,
    load_cutting_list_from_dict,
)
from panel_nesting.application.config.schema import (
    CuttingListFileSchema,
    CuttingListItemSchema,
    EdgeBandingSchema,
    NestingOptionsSchema,
    SheetSizeSchema,
)

__all__ = [
    "ConfigError",
    "CuttingListFileSchema",
    "CuttingListItemSchema",
    "EdgeBandingSchema",
    "NestingOptionsSchema",
    "SheetSizeSchema",
    "config_to_nesting_config",
    "config_to_parts",
    "config_to_sheet_size",
    "item_to_part",
    "load_cutting_list",
    "load_cutting_list_from_dict",
]
