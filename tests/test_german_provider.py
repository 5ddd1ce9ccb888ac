"""Tests for the OpenHolidays-backed German provider."""

from datetime import date

import httpx
import pytest

from holiday_check.protocols import StateHolidayProvider
from holiday_check.repositories import GermanHolidayProvider
from holiday_check.repositories import german_holiday_provider

BW_2025 = [
    {
        "id": "a1",
        "startDate": "2025-07-31",
        "endDate": "2025-09-13",
        "type": "School",
        "name": [{"language": "DE", "text": "Sommerferien"}],
        "subdivisions": [{"code": "DE-BW", "shortName": "BW"}],
    },
    {
        "id": "a2",
        "startDate": "2025-10-27",
        "endDate": "2025-10-30",
        "type": "School",
        "name": [{"language": "DE", "text": "Herbstferien"}],
    },
]


class Upstream:
    """Scripted fake of the OpenHolidays endpoint.

    Each script item is a status code, a (status, json) pair or an exception
    to raise. The last item repeats once the script is used up.
    """

    def __init__(self, script):
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        if isinstance(step, Exception):
            raise step
        if isinstance(step, int):
            return httpx.Response(step)
        status_code, body = step
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)


def make_provider(cache, upstream, max_attempts=2, retry_backoff=0):
    client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    return GermanHolidayProvider(
        cache=cache,
        client=client,
        base_url="https://openholidaysapi.test/SchoolHolidays",
        language="DE",
        max_attempts=max_attempts,
        retry_backoff=retry_backoff,
    )


def test_satisfies_protocol(cache):
    assert isinstance(GermanHolidayProvider.create(cache=cache), StateHolidayProvider)


async def test_fetches_and_normalizes(cache):
    upstream = Upstream([(200, BW_2025)])
    provider = make_provider(cache, upstream)

    periods = await provider.fetch_state_holidays(2025, "BW")

    assert [p.name for p in periods] == ["Sommerferien", "Herbstferien"]
    assert periods[0].start == date(2025, 7, 31)
    assert periods[0].end == date(2025, 9, 13)
    assert {p.region for p in periods} == {"BW"}


async def test_request_parameters(cache):
    upstream = Upstream([(200, [])])
    provider = make_provider(cache, upstream)

    await provider.fetch_state_holidays(2026, "NW")

    params = upstream.requests[0].url.params
    assert params["countryIsoCode"] == "DE"
    assert params["subdivisionCode"] == "DE-NW"
    assert params["languageIsoCode"] == "DE"
    assert params["validFrom"] == "2026-01-01"
    assert params["validTo"] == "2026-12-31"
    assert upstream.requests[0].headers["Accept"] == "application/json"


async def test_second_call_within_ttl_uses_cache(cache):
    upstream = Upstream([(200, BW_2025)])
    provider = make_provider(cache, upstream)

    first = await provider.fetch_state_holidays(2025, "BW")
    second = await provider.fetch_state_holidays(2025, "BW")

    assert first == second
    assert len(upstream.requests) == 1
    assert cache.get("DE_BW_2025") is not None


async def test_call_after_ttl_refetches(cache, clock):
    upstream = Upstream([(200, BW_2025)])
    provider = make_provider(cache, upstream)

    await provider.fetch_state_holidays(2025, "BW")
    clock.advance(86401)
    await provider.fetch_state_holidays(2025, "BW")

    assert len(upstream.requests) == 2


async def test_keys_are_per_state_and_year(cache):
    upstream = Upstream([(200, BW_2025)])
    provider = make_provider(cache, upstream)

    await provider.fetch_state_holidays(2025, "BW")
    await provider.fetch_state_holidays(2025, "BY")
    await provider.fetch_state_holidays(2026, "BW")

    assert len(upstream.requests) == 3


async def test_retries_once_after_server_error(cache):
    upstream = Upstream([503, (200, BW_2025)])
    provider = make_provider(cache, upstream)

    periods = await provider.fetch_state_holidays(2025, "BW")

    assert len(periods) == 2
    assert len(upstream.requests) == 2


async def test_retries_after_network_error(cache):
    upstream = Upstream([httpx.ConnectError("connection refused"), (200, BW_2025)])
    provider = make_provider(cache, upstream)

    periods = await provider.fetch_state_holidays(2025, "BW")

    assert len(periods) == 2


async def test_gives_up_with_empty_list_and_does_not_cache(cache):
    upstream = Upstream([500])
    provider = make_provider(cache, upstream)

    periods = await provider.fetch_state_holidays(2025, "HB")

    assert periods == []
    assert len(upstream.requests) == 2
    assert cache.get("DE_HB_2025") is None

    # Failures are not cached, the next call asks upstream again
    await provider.fetch_state_holidays(2025, "HB")
    assert len(upstream.requests) == 4


async def test_invalid_json_counts_as_failure(cache):
    upstream = Upstream([(200, "<html>maintenance</html>")])
    provider = make_provider(cache, upstream)

    assert await provider.fetch_state_holidays(2025, "HH") == []
    assert len(upstream.requests) == 2


async def test_drops_entries_without_usable_dates(cache):
    payload = [
        {"name": "sommerferien", "start": "2025-07-31", "end": "2025-09-13"},
        {"name": "kaputt", "start": "2025-10-01"},
        {"name": "verdreht", "startDate": "2025-10-10", "endDate": "2025-10-01"},
        {"title": "Herbstferien", "from": "27.10.2025", "to": "31.10.2025"},
    ]
    upstream = Upstream([(200, payload)])
    provider = make_provider(cache, upstream)

    periods = await provider.fetch_state_holidays(2025, "SN")

    assert [p.name for p in periods] == ["sommerferien", "Herbstferien"]


async def test_successful_empty_result_is_cached(cache):
    upstream = Upstream([(200, [])])
    provider = make_provider(cache, upstream)

    assert await provider.fetch_state_holidays(2025, "SL") == []
    assert await provider.fetch_state_holidays(2025, "SL") == []
    assert len(upstream.requests) == 1


@pytest.mark.parametrize("max_attempts", [1, 3])
async def test_attempts_are_configurable(cache, max_attempts):
    upstream = Upstream([502])
    provider = make_provider(cache, upstream, max_attempts=max_attempts)

    await provider.fetch_state_holidays(2025, "TH")

    assert len(upstream.requests) == max_attempts


async def test_backoff_grows_linearly_per_attempt(cache, monkeypatch):
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    monkeypatch.setattr(german_holiday_provider.asyncio, "sleep", fake_sleep)
    upstream = Upstream([503])
    provider = make_provider(cache, upstream, max_attempts=3, retry_backoff=0.15)

    assert await provider.fetch_state_holidays(2025, "BW") == []

    # No sleep after the last attempt
    assert sleeps == pytest.approx([0.15, 0.30])
    assert len(upstream.requests) == 3


async def test_no_backoff_after_success(cache, monkeypatch):
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    monkeypatch.setattr(german_holiday_provider.asyncio, "sleep", fake_sleep)
    upstream = Upstream([(200, BW_2025)])
    provider = make_provider(cache, upstream, retry_backoff=0.15)

    await provider.fetch_state_holidays(2025, "BW")

    assert sleeps == []


async def test_unrecognized_body_is_a_failure_and_not_cached(cache):
    upstream = Upstream([(200, {"error": "rate limited"})])
    provider = make_provider(cache, upstream)

    assert await provider.fetch_state_holidays(2025, "BE") == []
    assert len(upstream.requests) == 2
    assert cache.get("DE_BE_2025") is None


async def test_wrapped_empty_list_is_cached(cache):
    upstream = Upstream([(200, {"items": []})])
    provider = make_provider(cache, upstream)

    assert await provider.fetch_state_holidays(2025, "BE") == []
    assert cache.get("DE_BE_2025") == ()


async def test_unknown_state_code_is_rejected(cache):
    upstream = Upstream([(200, BW_2025)])
    provider = make_provider(cache, upstream)

    with pytest.raises(ValueError, match="XX"):
        await provider.fetch_state_holidays(2025, "XX")

    assert upstream.requests == []
