"""Source cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """A memoized upstream result.

    Attributes:
        key: Cache key, "<COUNTRY>_<REGION?>_<YEAR>" (e.g. "DE_BW_2025", "DK_2025")
        value: The cached value (a list of HolidayPeriod)
        expires_at: Clock reading after which the entry is stale
    """

    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at
