"""Classic algorithms and small data structures over lists, strings, trees, grids and graphs."""

__version__ = "0.1.0"