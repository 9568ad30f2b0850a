"""FastAPI REST API for panel nesting.

This module exposes the nesting service over HTTP: submit a cutting list
and receive sheet layouts, or list the available strategies.

Usage:
    uvicorn panel_nesting.web:app --reload
"""

from panel_nesting.web.app import app, create_app

__all__ = ["app", "create_app"]
