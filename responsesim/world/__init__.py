"""Static world data (location catalogue)."""

from .loaders import load_locations

__all__ = ["load_locations"]
