"""Danish school holidays from the bundled Copenhagen table.

The table covers a closed set of years. A year outside it is a coverage
gap: the provider logs a warning and returns an empty list.
"""

from holiday_check.entities import HolidayPeriod
from holiday_check.logging_config import get_logger
from holiday_check.protocols import SourceCache
from holiday_check.utils import parse_source_date

from .data import DENMARK_SCHOOL_HOLIDAYS
from .memory_cache import InMemorySourceCache

logger = get_logger(__name__)


class DenmarkHolidayProvider:
    """Static-table implementation of the CountryHolidayProvider protocol."""

    COUNTRY_CODE = "DK"

    def __init__(
        self,
        cache: SourceCache,
        table: dict[int, list[dict[str, str]]] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            cache: Source cache shared with the other providers (required).
            table: Year -> [{"name", "start", "end"}] with ISO dates. Defaults to the bundled table.
        """
        self._cache = cache
        self._table = DENMARK_SCHOOL_HOLIDAYS if table is None else table

    @classmethod
    def create(cls, cache: SourceCache | None = None) -> "DenmarkHolidayProvider":
        """Factory method to create DenmarkHolidayProvider with the bundled table."""
        if cache is None:
            cache = InMemorySourceCache.create()
        return cls(cache=cache)

    @classmethod
    def cache_key(cls, year: int) -> str:
        return f"{cls.COUNTRY_CODE}_{year}"

    def available_years(self) -> list[int]:
        """Years covered by the table, ascending."""
        return sorted(self._table)

    async def fetch_country_holidays(self, year: int) -> list[HolidayPeriod]:
        """Get the Danish school holidays for a year.

        Args:
            year: The calendar year

        Returns:
            Holiday periods in table order; empty if the year is not covered
        """
        key = self.cache_key(year)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        rows = self._table.get(year)
        if not rows:
            logger.warning("No Denmark holiday data available for year %d", year)
            return []

        periods = []
        for row in rows:
            start = parse_source_date(row.get("start"))
            end = parse_source_date(row.get("end"))
            if start is None or end is None or end < start:
                logger.warning("Dropping malformed Denmark holiday row for %d: %r", year, row)
                continue
            periods.append(
                HolidayPeriod(
                    name=row.get("name") or "",
                    start=start,
                    end=end,
                    region=self.COUNTRY_CODE,
                )
            )

        self._cache.put(key, tuple(periods))
        logger.info(
            "Denmark: loaded %d school holidays for %d (Copenhagen reference)",
            len(periods), year,
        )
        return periods
