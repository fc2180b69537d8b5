"""utilities: text helpers shared by the parsers."""

from fracgrid.utilities.splitter import split

__all__ = ["split"]
