"""Metadata-driven batch renaming for photos and music files."""

__all__ = ["__version__"]

__version__ = "0.1.0"
