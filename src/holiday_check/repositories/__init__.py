"""Repository layer for data access.

This layer hides the holiday sources and the source cache behind
protocol-based interfaces:
- GermanHolidayProvider: live OpenHolidays API, one request per state and year
- DenmarkHolidayProvider: bundled per-year table (Copenhagen reference)
- InMemorySourceCache: TTL memoization shared by both providers
"""

from holiday_check.protocols import CountryHolidayProvider, SourceCache, StateHolidayProvider

from .denmark_holiday_provider import DenmarkHolidayProvider
from .german_holiday_provider import GermanHolidayProvider
from .memory_cache import InMemorySourceCache

__all__ = [
    "CountryHolidayProvider",
    "DenmarkHolidayProvider",
    "GermanHolidayProvider",
    "InMemorySourceCache",
    "SourceCache",
    "StateHolidayProvider",
]
