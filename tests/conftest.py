"""Shared fixtures for holiday check tests.

No test talks to the real OpenHolidays API: upstream HTTP is faked with
httpx.MockTransport, providers are replaced by in-memory stubs.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from holiday_check.api.app import create_app
from holiday_check.entities import HolidayPeriod
from holiday_check.repositories import DenmarkHolidayProvider, InMemorySourceCache
from holiday_check.services import HolidayCheckService


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubStateProvider:
    """In-memory StateHolidayProvider that records every call."""

    def __init__(self, holidays: dict[str, list[HolidayPeriod]] | None = None) -> None:
        self.holidays = holidays or {}
        self.calls: list[tuple[int, str]] = []

    async def fetch_state_holidays(self, year: int, state_code: str) -> list[HolidayPeriod]:
        self.calls.append((year, state_code))
        return list(self.holidays.get(state_code, []))


class StubCountryProvider:
    """In-memory CountryHolidayProvider that records every call."""

    def __init__(self, holidays: list[HolidayPeriod] | None = None) -> None:
        self.holidays = holidays or []
        self.calls: list[int] = []

    async def fetch_country_holidays(self, year: int) -> list[HolidayPeriod]:
        self.calls.append(year)
        return list(self.holidays)


def period(name: str, start: str, end: str, region: str | None = None) -> HolidayPeriod:
    """Build a HolidayPeriod from ISO dates."""
    return HolidayPeriod(
        name=name,
        start=date.fromisoformat(start),
        end=date.fromisoformat(end),
        region=region,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return InMemorySourceCache(default_ttl=86400, clock=clock)


@pytest.fixture
def german_stub():
    """German stub: summer holidays in BW and BY, autumn holidays in BE."""
    return StubStateProvider(
        {
            "BW": [
                period("sommerferien", "2025-07-31", "2025-09-13", "BW"),
                period("herbstferien", "2025-10-27", "2025-10-31", "BW"),
            ],
            "BY": [period("sommerferien", "2025-08-01", "2025-09-15", "BY")],
            "BE": [period("herbstferien", "2025-10-20", "2025-11-01", "BE")],
        }
    )


@pytest.fixture
def service(german_stub, cache):
    """Service with stubbed German states and the real bundled Danish table."""
    return HolidayCheckService(
        german_provider=german_stub,
        denmark_provider=DenmarkHolidayProvider(cache=cache),
        cache=cache,
    )


@pytest.fixture
def client(service):
    """Create a test client serving the stubbed service."""
    return TestClient(create_app(holiday_service=service))
