"""Utility modules for the holiday check service."""

from .dates import format_date, intervals_overlap, parse_source_date, parse_strict_date

__all__ = [
    "format_date",
    "intervals_overlap",
    "parse_source_date",
    "parse_strict_date",
]
