"""Classic algorithms and data structures: sorts, lists, stacks, graphs and grids."""

__version__ = "0.1.0"