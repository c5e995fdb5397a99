"""Output formatting modules."""

from .formatters import format_value, format_result, format_json, format_conversions_table

__all__ = [
    "format_value",
    "format_result",
    "format_json",
    "format_conversions_table",
]
