"""Holiday provider protocols.

Germany is queried per federal state, Denmark per country. Both return
normalized HolidayPeriod lists for a whole year and never raise for an
unavailable or uncovered source: they degrade to an empty list.
"""

from typing import Protocol, runtime_checkable

from holiday_check.entities import HolidayPeriod


@runtime_checkable
class StateHolidayProvider(Protocol):
    """Protocol for sources that report school holidays per German state."""

    async def fetch_state_holidays(self, year: int, state_code: str) -> list[HolidayPeriod]:
        """Fetch the school holidays of one state for a year.

        Args:
            year: The calendar year
            state_code: Two-letter state code ("BW", "BY", ...)

        Returns:
            Holiday periods, empty if the source is unavailable
        """
        ...


@runtime_checkable
class CountryHolidayProvider(Protocol):
    """Protocol for sources that report one national school holiday calendar."""

    async def fetch_country_holidays(self, year: int) -> list[HolidayPeriod]:
        """Fetch the school holidays of the country for a year.

        Args:
            year: The calendar year

        Returns:
            Holiday periods, empty if the year is not covered
        """
        ...
