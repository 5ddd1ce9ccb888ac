#!/usr/bin/env python3
"""
Demo script for the school holiday check.

Checks a few date ranges against the live OpenHolidays API (Germany) and
the bundled Copenhagen table (Denmark), then repeats one query to show
the source cache at work.

Usage:
    python scripts/demo.py [FROM_DATE TO_DATE YEAR]
"""

import asyncio
import sys
import time

from holiday_check import HolidayCheckService, QueryValidationError
from holiday_check.entities import CheckResult, HolidayPeriod
from holiday_check.utils import format_date


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def describe(period: HolidayPeriod) -> str:
    return f"{period.name} ({format_date(period.start)} - {format_date(period.end)})"


def print_result(result: CheckResult) -> None:
    query = result.query
    print(f"\n  Range: {query.from_date} - {query.to_date} ({query.year})")

    if result.germany.has_overlap:
        print(f"  Germany: {len(result.germany.regions)} state(s) with school holidays")
        for region in result.germany.regions:
            holidays = ", ".join(describe(p) for p in region.periods)
            print(f"    {region.state_name:<24} {holidays}")
    else:
        print("  Germany: no school holidays")

    if result.denmark.has_overlap:
        print("  Denmark: " + ", ".join(describe(p) for p in result.denmark.periods))
    else:
        print("  Denmark: no school holidays")


async def demo_ranges(service: HolidayCheckService, queries: list[tuple[str, str, int]]) -> None:
    """Check several ranges."""
    print_section("Holiday overlap")

    for from_date, to_date, year in queries:
        try:
            result = await service.check_holidays(from_date, to_date, year)
        except QueryValidationError as e:
            print(f"\n  {from_date} - {to_date}: rejected ({e.message})")
            continue
        print_result(result)


async def demo_cache(service: HolidayCheckService) -> None:
    """Repeat a query; the second run is served from the source cache."""
    print_section("Source cache")

    for label in ("cold", "warm"):
        start_time = time.time()
        await service.check_holidays("01.07.2025", "31.07.2025", 2025)
        elapsed_ms = (time.time() - start_time) * 1000
        print(f"  {label:<5} {elapsed_ms:8.1f} ms")

    stats = service.get_stats()
    print(f"  Cached sources: {stats['total_entries']}")


async def main() -> None:
    """Run all demos."""
    print("\n🏖  School Holiday Check Demo")
    print("=" * 70)

    if len(sys.argv) == 4:
        queries = [(sys.argv[1], sys.argv[2], int(sys.argv[3]))]
    else:
        queries = [
            ("01.07.2025", "31.07.2025", 2025),
            ("20.10.2025", "24.10.2025", 2025),
            ("01.03.2025", "10.03.2025", 2025),
            ("31.02.2025", "10.03.2025", 2025),
        ]

    service = HolidayCheckService.create()
    try:
        await demo_ranges(service, queries)
        await demo_cache(service)

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except Exception as e:
        print(f"\n❌ Error: {e}")
        print("\nCheck your network connection or set OPENHOLIDAYS_BASE_URL.")
    finally:
        await service.german_provider.aclose()


if __name__ == "__main__":
    asyncio.run(main())
