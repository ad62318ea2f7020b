"""Fuzzy search over the documented JASS natives published by jassdoc."""

__version__ = "0.1.0"
