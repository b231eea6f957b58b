"""A tile-based puzzle game: collect every item, avoid the guards, reach the exit."""

__version__ = "1.0.0"

__all__ = ["__version__"]