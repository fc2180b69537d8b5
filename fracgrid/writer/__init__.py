"""writer: CSS text rendering."""

from fracgrid.writer.writer import render_rule, render_rules

__all__ = ["render_rule", "render_rules"]
