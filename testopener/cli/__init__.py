"""Command-line interface for testopener."""
