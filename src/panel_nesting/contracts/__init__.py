"""Protocols shared across layers."""

from .strategies import LayoutEngine

__all__ = [
    "LayoutEngine",
]
