"""api: stylesheet generation entry point."""

from fracgrid.api.generate import generate_css, list_layouts

__all__ = ["generate_css", "list_layouts"]
