"""Command implementations for mdtrack CLI."""

from .series import add_series_arguments, format_csv, format_json, handle_series

__all__ = [
    "add_series_arguments",
    "handle_series",
    "format_json",
    "format_csv",
]
