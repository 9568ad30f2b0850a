"""Pydantic schemas for the REST API."""

from panel_nesting.web.schemas.requests import NestingRequest
from panel_nesting.web.schemas.responses import (
    ErrorResponseSchema,
    NestingResponseSchema,
    NestingResultSchema,
    PlacedPartSchema,
    StrategyListItemSchema,
    StrategyListSchema,
    UnplacedPartSchema,
)

__all__ = [
    # Requests
    "NestingRequest",
    # Responses
    "ErrorResponseSchema",
    "NestingResponseSchema",
    "NestingResultSchema",
    "PlacedPartSchema",
    "StrategyListItemSchema",
    "StrategyListSchema",
    "UnplacedPartSchema",
]
