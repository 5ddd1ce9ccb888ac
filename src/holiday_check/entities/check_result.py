"""Check result domain entities.

Germany and Denmark are separate result types: Germany groups its holidays
by federal state, Denmark reports one flat national list.
"""

from dataclasses import dataclass, field

from .holiday_period import HolidayPeriod
from .region import RegionEntry


@dataclass(frozen=True)
class CheckQuery:
    """The query echoed back with every result."""

    from_date: str
    to_date: str
    year: int


@dataclass(frozen=True)
class GermanyResult:
    """Overlaps per German state (only states with at least one overlap)."""

    regions: tuple[RegionEntry, ...] = field(default_factory=tuple)
    country_name: str = "Deutschland"
    country_code: str = "DE"

    @property
    def has_overlap(self) -> bool:
        return len(self.regions) > 0


@dataclass(frozen=True)
class DenmarkResult:
    """Overlaps with the national Danish reference calendar."""

    periods: tuple[HolidayPeriod, ...] = field(default_factory=tuple)
    country_name: str = "Dänemark"
    country_code: str = "DK"

    @property
    def has_overlap(self) -> bool:
        return len(self.periods) > 0


CountryResult = GermanyResult | DenmarkResult


@dataclass(frozen=True)
class CheckResult:
    """The complete answer to one holiday check query."""

    query: CheckQuery
    germany: GermanyResult
    denmark: DenmarkResult
