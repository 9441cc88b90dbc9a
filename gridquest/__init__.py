"""A tile-based grid game driven by text level files, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]