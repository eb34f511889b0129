"""A small modal, vi-like terminal text editor with UTF-8 aware editing."""

__version__ = "0.1.0"

__all__ = ["__version__"]