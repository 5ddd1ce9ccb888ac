"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_entry import CacheEntry
from .check_result import CheckQuery, CheckResult, CountryResult, DenmarkResult, GermanyResult
from .holiday_period import DateRange, HolidayPeriod
from .region import GERMAN_STATES, GERMAN_STATES_BY_CODE, GermanState, RegionEntry

__all__ = [
    "CacheEntry",
    "CheckQuery",
    "CheckResult",
    "CountryResult",
    "DateRange",
    "DenmarkResult",
    "GERMAN_STATES",
    "GERMAN_STATES_BY_CODE",
    "GermanState",
    "GermanyResult",
    "HolidayPeriod",
    "RegionEntry",
]
