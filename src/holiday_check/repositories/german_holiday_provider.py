"""German school holidays from the OpenHolidays API.

Queries https://openholidaysapi.org/SchoolHolidays once per federal state
and year, using ISO 3166-2 subdivision codes (DE-BW, DE-BY, ...).

Failure handling:
- Non-2xx status, transport errors, non-JSON bodies and bodies without a
  holiday list count as a failed attempt
- Failed attempts are retried with a linear backoff (backoff x attempt)
- After the last attempt the state degrades to "no holidays reported";
  the failure is logged and never cached
"""

import asyncio

import httpx

from holiday_check.config import settings
from holiday_check.entities import GERMAN_STATES_BY_CODE, HolidayPeriod
from holiday_check.exceptions import UpstreamError
from holiday_check.logging_config import get_logger
from holiday_check.protocols import SourceCache

from .field_extractors import extract_end, extract_entries, extract_name, extract_start, has_entry_list
from .memory_cache import InMemorySourceCache

logger = get_logger(__name__)


class GermanHolidayProvider:
    """OpenHolidays implementation of the StateHolidayProvider protocol.

    Example:
        ```python
        provider = GermanHolidayProvider.create(cache=InMemorySourceCache.create())
        periods = await provider.fetch_state_holidays(2025, "BW")
        ```
    """

    HEADERS = {
        "Accept": "application/json",
        "User-Agent": settings.http_user_agent,
    }

    def __init__(
        self,
        cache: SourceCache,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        language: str | None = None,
        max_attempts: int | None = None,
        retry_backoff: float | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            cache: Source cache shared with the other providers (required).
            client: HTTP client to use. If None, one is created lazily and owned by the provider.
            base_url: School holidays endpoint. Defaults to settings.school_holidays_url.
            language: Preferred language for holiday names. Defaults to settings.
            max_attempts: Attempts per state before giving up. Defaults to settings.
            retry_backoff: Seconds to wait per attempt number before retrying. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
        """
        self._cache = cache
        self._client = client
        self._owns_client = client is None
        self._url = base_url or settings.school_holidays_url
        self._language = language or settings.holiday_language
        self._max_attempts = max_attempts or settings.fetch_max_attempts
        self._retry_backoff = settings.fetch_retry_backoff if retry_backoff is None else retry_backoff
        self._timeout = timeout or settings.http_timeout

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @classmethod
    def create(
        cls,
        cache: SourceCache | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> "GermanHolidayProvider":
        """Factory method to create GermanHolidayProvider with defaults.

        Args:
            cache: Source cache. If None, a private in-memory cache is created.
            client: HTTP client. If None, one is created lazily.

        Returns:
            Configured GermanHolidayProvider
        """
        if cache is None:
            cache = InMemorySourceCache.create()
        return cls(cache=cache, client=client)

    @staticmethod
    def cache_key(year: int, state_code: str) -> str:
        return f"DE_{state_code}_{year}"

    async def fetch_state_holidays(self, year: int, state_code: str) -> list[HolidayPeriod]:
        """Fetch the school holidays of one federal state for a year.

        Args:
            year: The calendar year
            state_code: Two-letter state code ("BW", "BY", ...)

        Returns:
            Normalized holiday periods; empty if every attempt failed
        """
        if state_code not in GERMAN_STATES_BY_CODE:
            raise ValueError(f"Unknown German state code: {state_code!r}")

        key = self.cache_key(year, state_code)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return list(cached)

        for attempt in range(1, self._max_attempts + 1):
            try:
                payload = await self._request(year, state_code)
            except UpstreamError as e:
                logger.warning(
                    "Fetching school holidays for %s %d failed (attempt %d/%d): %s",
                    state_code, year, attempt, self._max_attempts, e,
                )
                if attempt < self._max_attempts:
                    await asyncio.sleep(self._retry_backoff * attempt)
                continue

            periods = self._normalize(payload, state_code)
            self._cache.put(key, tuple(periods))
            return periods

        logger.error(
            "No school holidays for %s %d: source unavailable after %d attempts",
            state_code, year, self._max_attempts,
        )
        return []

    async def _request(self, year: int, state_code: str) -> object:
        """Perform one request against the upstream API.

        Raises:
            UpstreamError: On transport errors, non-2xx status, a non-JSON body
                or a body without a list of holidays
        """
        params = {
            "countryIsoCode": "DE",
            "subdivisionCode": GERMAN_STATES_BY_CODE[state_code].subdivision_code,
            "languageIsoCode": self._language,
            "validFrom": f"{year}-01-01",
            "validTo": f"{year}-12-31",
        }

        try:
            response = await self.client.get(self._url, params=params, headers=self.HEADERS)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Network error: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"OpenHolidays API returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON body: {e}") from e

        if not has_entry_list(payload):
            raise UpstreamError(f"Unexpected response shape: {type(payload).__name__}")
        return payload

    def _normalize(self, payload: object, state_code: str) -> list[HolidayPeriod]:
        periods = []
        for entry in extract_entries(payload):
            start = extract_start(entry)
            end = extract_end(entry)
            if start is None or end is None or end < start:
                logger.debug("Dropping holiday entry without usable dates: %r", entry)
                continue

            periods.append(
                HolidayPeriod(
                    name=extract_name(entry, self._language) or "",
                    start=start,
                    end=end,
                    region=state_code,
                )
            )
        return periods

    async def aclose(self) -> None:
        """Close the HTTP client if the provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
