"""A small web server that serves recipes from an SQLite database."""

__version__ = "0.1.1"
__all__ = ["__version__"]