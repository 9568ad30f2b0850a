"""Pydantic request schemas for the REST API."""

from pydantic import Field

from panel_nesting.application.config.schema import CuttingListFileSchema


class NestingRequest(CuttingListFileSchema):
    """Request for nesting a cutting list.

    Carries the same fields as a cutting-list file, so a file's contents can
    be posted unchanged.
    """

    fail_on_unplaced: bool = Field(
        default=False,
        description="Respond with 422 instead of a partial layout when parts are too large",
    )
