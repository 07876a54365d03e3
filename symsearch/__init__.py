"""Fuzzy search over qualified symbol names."""

__version__ = "0.1.0"
