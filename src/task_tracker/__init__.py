"""Task tracker: a small CRUD HTTP service over SQLite."""

__version__ = "0.1.0"
