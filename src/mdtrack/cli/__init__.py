"""Command-line interface for mdtrack."""
