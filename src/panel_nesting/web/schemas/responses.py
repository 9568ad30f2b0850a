"""Pydantic response schemas for the REST API.

Responses use camelCase keys, matching the JSON export of nesting results.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from panel_nesting.application.config.schema import EdgeBandingSchema, SheetSizeSchema
from panel_nesting.domain.value_objects import GrainDirection

_RESPONSE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlacedPartSchema(BaseModel):
    """A part placed on a sheet."""

    model_config = _RESPONSE_CONFIG

    id: str = Field(..., description="Instance identifier")
    part_id: str = Field(..., description="Cutting-list item identifier")
    part_name: str = Field(default="", description="Human-readable part name")
    x: float = Field(..., description="Offset from the sheet's left edge in mm")
    y: float = Field(..., description="Offset from the sheet's top edge in mm")
    length: float = Field(..., description="Extent along the sheet length, as placed")
    width: float = Field(..., description="Extent along the sheet width, as placed")
    rotation: int = Field(..., description="0 or 90 degrees")
    grain: GrainDirection = Field(..., description="Grain requirement")
    grain_violated: bool = Field(
        default=False, description="Placed in an orientation its grain forbids"
    )
    sheet_index: int = Field(..., description="Zero-based sheet index")
    edge_banding: EdgeBandingSchema = Field(default_factory=EdgeBandingSchema)


class UnplacedPartSchema(BaseModel):
    """A part instance too large for the stock sheet."""

    model_config = _RESPONSE_CONFIG

    id: str = Field(..., description="Instance identifier")
    part_id: str = Field(..., description="Cutting-list item identifier")
    length: float = Field(..., description="Part length in mm")
    width: float = Field(..., description="Part width in mm")
    grain: GrainDirection = Field(..., description="Grain requirement")
    reason: str = Field(..., description="Why the part was not placed")


class NestingResultSchema(BaseModel):
    """Nesting outcome for one material group."""

    model_config = _RESPONSE_CONFIG

    sheet_size: SheetSizeSchema = Field(..., description="Stock sheet size used")
    material_type: str = Field(..., description="Material of the group")
    thickness: float = Field(..., description="Material thickness in mm")
    strategy: str = Field(..., description="Strategy that produced the layout")
    parts: list[PlacedPartSchema] = Field(default_factory=list)
    efficiency: float = Field(..., description="Reported efficiency percentage")
    raw_efficiency: float = Field(..., description="Used area over total area, percent")
    used_area: float = Field(..., description="Sum of placed part areas in mm²")
    waste_area: float = Field(..., description="Unused sheet area in mm²")
    total_area: float = Field(..., description="Sheet area times sheet count in mm²")
    sheet_count: int = Field(..., description="Number of sheets consumed")
    unplaced: list[UnplacedPartSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class NestingResponseSchema(BaseModel):
    """Response for a nesting run."""

    model_config = _RESPONSE_CONFIG

    results: list[NestingResultSchema] = Field(
        default_factory=list, description="One result per material group"
    )
    sheet_count: int = Field(..., description="Sheets consumed across all groups")
    unplaced_count: int = Field(..., description="Instances not placed in any group")


class StrategyListItemSchema(BaseModel):
    """Strategy entry in the strategy list."""

    name: str = Field(..., description="Name accepted by the strategy option")
    label: str = Field(..., description="Display label")
    description: str = Field(..., description="What the strategy does")
    deterministic: bool = Field(..., description="Same input always yields the same layout")


class StrategyListSchema(BaseModel):
    """Response for listing strategies."""

    default: str = Field(..., description="Strategy used when none is requested")
    strategies: list[StrategyListItemSchema] = Field(default_factory=list)
    aliases: dict[str, str] = Field(
        default_factory=dict, description="Alternate names and the strategy they select"
    )


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
