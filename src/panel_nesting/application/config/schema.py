"""Pydantic models for cutting-list files and nesting options.

Field names are snake_case; the camelCase names used by cutting-list
producers (``partName``, ``materialType``, ``edgeBanding``...) are accepted
as aliases. Unknown keys are rejected.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from panel_nesting.domain.value_objects import GrainDirection

_MODEL_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class EdgeBandingSchema(BaseModel):
    """Edge banding flags of a cutting-list item."""

    model_config = _MODEL_CONFIG

    front: bool = False
    back: bool = False
    left: bool = False
    right: bool = False


class SheetSizeSchema(BaseModel):
    """Stock sheet dimensions in millimetres."""

    model_config = _MODEL_CONFIG

    length: float = Field(default=2440.0, gt=0, description="Sheet length in mm")
    width: float = Field(default=1220.0, gt=0, description="Sheet width in mm")


class CuttingListItemSchema(BaseModel):
    """One line of a cutting list."""

    model_config = _MODEL_CONFIG

    id: str = Field(..., min_length=1, description="Cutting-list item identifier")
    part_name: str = Field(default="", description="Human-readable part name")
    cabinet_id: str | None = Field(default=None, description="Owning cabinet id")
    cabinet_name: str | None = Field(default=None, description="Owning cabinet name")
    material_type: str = Field(default="", description="Sheet material name")
    thickness: float = Field(default=0.0, ge=0, description="Material thickness in mm")
    length: float = Field(..., gt=0, description="Part length in mm")
    width: float = Field(..., gt=0, description="Part width in mm")
    quantity: int = Field(default=1, ge=0, description="Number of parts required")
    edge_banding: EdgeBandingSchema = Field(default_factory=EdgeBandingSchema)
    grain: GrainDirection = Field(
        default=GrainDirection.NONE, description="Grain direction requirement"
    )
    priority: int = Field(default=0, description="Cutting priority")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_numeric_id(cls, value: object) -> object:
        """Accept numeric identifiers, as produced by spreadsheet exports."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class NestingOptionsSchema(BaseModel):
    """Options controlling a nesting run."""

    model_config = _MODEL_CONFIG

    sheet_size: SheetSizeSchema | None = Field(
        default=None, description="Stock sheet size, 2440x1220 mm if omitted"
    )
    material_filter: str | None = Field(
        default=None, description="Only nest this material ('all' for everything)"
    )
    strategy: str | None = Field(default=None, description="Strategy name")
    seed: int | None = Field(
        default=None, description="Seed for randomized strategies"
    )


class CuttingListFileSchema(NestingOptionsSchema):
    """Root model of a cutting-list JSON file."""

    cutting_list: list[CuttingListItemSchema] = Field(
        default_factory=list, description="Parts to nest"
    )
