"""Helpers for HTML books: snippet lines, dotted TOML keys, themes and code blocks."""

__version__ = "0.1.0"