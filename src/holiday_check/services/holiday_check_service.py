"""Holiday check service for core business logic.

This service resolves a user's date range against the school holidays
of all German federal states and the Danish reference calendar.
"""

from holiday_check.config import settings
from holiday_check.entities import (
    GERMAN_STATES,
    CheckQuery,
    CheckResult,
    DateRange,
    DenmarkResult,
    GermanState,
    GermanyResult,
    HolidayPeriod,
    RegionEntry,
)
from holiday_check.exceptions import HolidayServiceError, QueryValidationError
from holiday_check.logging_config import get_logger
from holiday_check.protocols import CountryHolidayProvider, SourceCache, StateHolidayProvider
from holiday_check.repositories import DenmarkHolidayProvider, GermanHolidayProvider, InMemorySourceCache
from holiday_check.utils import intervals_overlap, parse_strict_date

from .name_translator import translate_holiday_name

logger = get_logger(__name__)


class HolidayCheckService:
    """Core overlap resolution service.

    This service depends on PROTOCOLS, not concrete implementations:
    - StateHolidayProvider: per-state German source (OpenHolidays, fakes, ...)
    - CountryHolidayProvider: national Danish source (static table, ...)

    German states are fetched one after another, never concurrently, so a
    single check sends at most 16 sequential requests upstream.

    Example:
        ```python
        from holiday_check.services import HolidayCheckService

        service = HolidayCheckService.create()
        result = await service.check_holidays("01.07.2025", "31.07.2025", 2025)
        result.germany.has_overlap
        ```
    """

    def __init__(
        self,
        german_provider: StateHolidayProvider,
        denmark_provider: CountryHolidayProvider,
        cache: SourceCache | None = None,
        states: tuple[GermanState, ...] = GERMAN_STATES,
        min_year: int | None = None,
        max_year: int | None = None,
    ) -> None:
        """Initialize the holiday check service.

        Args:
            german_provider: Source for German state holidays (required).
            denmark_provider: Source for Danish holidays (required).
            cache: The cache shared by the providers, exposed for stats and clearing.
            states: German states to check, in request order.
            min_year: Lowest accepted query year. Defaults to settings.
            max_year: Highest accepted query year. Defaults to settings.
        """
        self._german = german_provider
        self._denmark = denmark_provider
        self._cache = cache
        self._states = states
        self._min_year = settings.min_year if min_year is None else min_year
        self._max_year = settings.max_year if max_year is None else max_year

    @classmethod
    def create(
        cls,
        cache: SourceCache | None = None,
        german_provider: StateHolidayProvider | None = None,
        denmark_provider: CountryHolidayProvider | None = None,
    ) -> "HolidayCheckService":
        """Factory method to create HolidayCheckService with default providers.

        Both default providers share one in-memory source cache.

        Args:
            cache: Source cache. If None, an InMemorySourceCache is created.
            german_provider: German source. If None, uses the OpenHolidays provider.
            denmark_provider: Danish source. If None, uses the bundled table.

        Returns:
            Configured HolidayCheckService
        """
        if cache is None:
            cache = InMemorySourceCache.create()
        if german_provider is None:
            german_provider = GermanHolidayProvider.create(cache=cache)
        if denmark_provider is None:
            denmark_provider = DenmarkHolidayProvider.create(cache=cache)

        return cls(
            german_provider=german_provider,
            denmark_provider=denmark_provider,
            cache=cache,
        )

    def parse_query(self, from_date: str, to_date: str, year: int) -> DateRange:
        """Validate a query and turn it into a date range.

        Raises:
            QueryValidationError: If a date is malformed, the range is empty or
                inverted, a date lies outside the declared year, or the year is
                outside the supported window
        """
        if not self._min_year <= year <= self._max_year:
            raise QueryValidationError(
                f"Year must be between {self._min_year} and {self._max_year}",
                details=[{"field": "year", "value": year}],
            )

        start = parse_strict_date(from_date)
        end = parse_strict_date(to_date)

        if start >= end:
            raise QueryValidationError(
                "fromDate must be before toDate",
                details=[{"field": "fromDate", "value": from_date}, {"field": "toDate", "value": to_date}],
            )

        mismatched = [
            {"field": field, "value": text}
            for field, text, parsed in (("fromDate", from_date, start), ("toDate", to_date, end))
            if parsed.year != year
        ]
        if mismatched:
            raise QueryValidationError(f"Dates must lie in the year {year}", details=mismatched)

        return DateRange(start=start, end=end)

    async def check_holidays(self, from_date: str, to_date: str, year: int) -> CheckResult:
        """Check a date range against German and Danish school holidays.

        Business logic:
        1. Validate the query (no upstream call on failure)
        2. For every German state, in order: fetch, keep overlaps, translate names
        3. Fetch Denmark, keep overlaps, translate names
        4. Assemble the result with the echoed query

        Args:
            from_date: First day, DD.MM.YYYY
            to_date: Last day, DD.MM.YYYY
            year: The year both dates must lie in

        Returns:
            CheckResult; empty overlap lists are a normal outcome

        Raises:
            QueryValidationError: If the query is invalid
            HolidayServiceError: On any unexpected failure
        """
        date_range = self.parse_query(from_date, to_date, year)

        try:
            regions = []
            for state in self._states:
                entry = await self._resolve_state(state, year, date_range)
                if entry.periods:
                    regions.append(entry)

            danish_periods = await self._denmark.fetch_country_holidays(year)

            return CheckResult(
                query=CheckQuery(from_date=from_date, to_date=to_date, year=year),
                germany=GermanyResult(regions=tuple(regions)),
                denmark=DenmarkResult(periods=self._overlapping(danish_periods, date_range)),
            )
        except Exception as e:
            logger.exception("Error checking holidays for %s - %s", from_date, to_date)
            raise HolidayServiceError("Failed to check holidays") from e

    async def _resolve_state(
        self,
        state: GermanState,
        year: int,
        date_range: DateRange,
    ) -> RegionEntry:
        periods = await self._german.fetch_state_holidays(year, state.code)
        return RegionEntry(
            state_code=state.code,
            state_name=state.name,
            periods=self._overlapping(periods, date_range),
        )

    @staticmethod
    def _overlapping(
        periods: list[HolidayPeriod],
        date_range: DateRange,
    ) -> tuple[HolidayPeriod, ...]:
        return tuple(
            HolidayPeriod(
                name=translate_holiday_name(period.name),
                start=period.start,
                end=period.end,
                region=period.region,
            )
            for period in periods
            if intervals_overlap(date_range.start, date_range.end, period.start, period.end)
        )

    def get_stats(self) -> dict:
        """Get service statistics.

        Returns:
            Dictionary with cache statistics and source coverage
        """
        stats = self._cache.get_stats() if self._cache is not None else {}
        stats["german_states"] = len(self._states)
        stats["year_window"] = [self._min_year, self._max_year]
        available_years = getattr(self._denmark, "available_years", None)
        if callable(available_years):
            stats["denmark_years"] = available_years()
        return stats

    async def is_healthy(self) -> bool:
        """Check if the service is usable.

        Returns:
            True if both providers are wired and the source cache answers
        """
        if self._german is None or self._denmark is None:
            return False
        if self._cache is None:
            return True
        try:
            self._cache.get_stats()
        except Exception:
            logger.exception("Source cache health check failed")
            return False
        return True

    def clear_cache(self) -> int:
        """Clear the source cache.

        Returns:
            Number of entries deleted
        """
        if self._cache is None:
            return 0
        return self._cache.clear()

    @property
    def states(self) -> tuple[GermanState, ...]:
        """The German states checked by this service."""
        return self._states

    @property
    def german_provider(self) -> StateHolidayProvider:
        """Get the German provider (for testing and shutdown)."""
        return self._german

    @property
    def denmark_provider(self) -> CountryHolidayProvider:
        """Get the Danish provider (for testing)."""
        return self._denmark
