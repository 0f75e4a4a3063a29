"""Mutable byte strings with compare, search, split, format and stream helpers, and a package URL record."""

__version__ = "0.1.0"
__all__ = ["bstring", "compare", "search", "split", "formatting", "db", "streams"]