"""API routers for the REST API."""

from panel_nesting.web.routers.nesting import router as nesting_router

__all__ = ["nesting_router"]
