"""Holiday period and date range domain entities."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    """An inclusive calendar date range.

    Attributes:
        start: First day of the range
        end: Last day of the range (never before start)
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} is before start {self.start}")


@dataclass(frozen=True)
class HolidayPeriod:
    """A single school holiday interval for one region and year.

    Attributes:
        name: Holiday name as reported by the source (or translated)
        start: First day of the holiday
        end: Last day of the holiday
        region: State code ("BW", ...) or country code ("DK") of the source
    """

    name: str
    start: date
    end: date
    region: str | None = None
