"""Conversion from validated cutting-list schemas to domain objects."""

from __future__ import annotations

from typing import Iterable

from panel_nesting.application.config.schema import (
    CuttingListItemSchema,
    NestingOptionsSchema,
    SheetSizeSchema,
)
from panel_nesting.application.service import NestingConfig
from panel_nesting.application.strategies import DEFAULT_STRATEGY
from panel_nesting.domain.value_objects import (
    EdgeBanding,
    PartSpecification,
    SheetSize,
)


def item_to_part(item: CuttingListItemSchema) -> PartSpecification:
    """Convert one cutting-list item into a part specification."""
    return PartSpecification(
        id=item.id,
        length=item.length,
        width=item.width,
        quantity=item.quantity,
        grain=item.grain,
        edge_banding=EdgeBanding(
            front=item.edge_banding.front,
            back=item.edge_banding.back,
            left=item.edge_banding.left,
            right=item.edge_banding.right,
        ),
        material_type=item.material_type,
        thickness=item.thickness,
        part_name=item.part_name,
        cabinet_id=item.cabinet_id,
        cabinet_name=item.cabinet_name,
        priority=item.priority,
    )


def config_to_parts(items: Iterable[CuttingListItemSchema]) -> list[PartSpecification]:
    """Convert cutting-list items into part specifications, keeping their order."""
    return [item_to_part(item) for item in items]


def config_to_sheet_size(sheet: SheetSizeSchema | None) -> SheetSize:
    if sheet is None:
        return SheetSize()
    return SheetSize(length=sheet.length, width=sheet.width)


def config_to_nesting_config(
    options: NestingOptionsSchema,
    fail_on_unplaced: bool = False,
) -> NestingConfig:
    """Build service defaults from the options in a file or request."""
    return NestingConfig(
        sheet_size=config_to_sheet_size(options.sheet_size),
        strategy=options.strategy or DEFAULT_STRATEGY,
        material_filter=options.material_filter,
        seed=options.seed,
        fail_on_unplaced=fail_on_unplaced,
    )
