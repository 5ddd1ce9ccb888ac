"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the upstream holiday sources (live API, static table, fakes)
- Unit testing with a fake-clock cache or stub providers
- Clear separation of concerns
"""

from .holiday_provider import CountryHolidayProvider, StateHolidayProvider
from .source_cache import SourceCache

__all__ = [
    "CountryHolidayProvider",
    "SourceCache",
    "StateHolidayProvider",
]
