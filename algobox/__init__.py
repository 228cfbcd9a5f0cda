"""Classic algorithms over integers, strings, arrays, graphs and grids."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "dp", "graphs", "grids", "strings"]