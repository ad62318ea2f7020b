"""Command-line interface for jasssearch."""
