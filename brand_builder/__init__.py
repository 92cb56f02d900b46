"""Brand Builder - product photo and marketing variant generation."""

__version__ = "0.1.0"
