"""Command line interface for panel nesting."""
