"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from panel_nesting.application.config import ConfigError
from panel_nesting.domain import NestingError, PartTooLargeForSheetError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(PartTooLargeForSheetError)
    async def part_too_large_handler(
        request: Request, exc: PartTooLargeForSheetError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "part_too_large",
                "details": [u.to_dict() for u in exc.unplaced],
            },
        )

    @app.exception_handler(NestingError)
    async def nesting_error_handler(request: Request, exc: NestingError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "nesting",
                "details": None,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )
