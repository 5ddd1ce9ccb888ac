"""In-process TTL cache for upstream holiday data.

Entries live only as long as the process. There is no capacity bound:
the key space (regions x years) is small and fixed.
"""

import time
from collections.abc import Callable
from typing import Any

from holiday_check.config import settings
from holiday_check.entities import CacheEntry
from holiday_check.logging_config import get_logger

logger = get_logger(__name__)


class InMemorySourceCache:
    """Dictionary-backed implementation of the SourceCache protocol.

    Values are replaced wholesale on put, so concurrent requests never
    merge into the same entry; the last write for a key wins.

    Example:
        ```python
        cache = InMemorySourceCache.create()
        cache.put("DE_BW_2025", periods)
        cache.get("DE_BW_2025")  # periods, until the TTL runs out
        ```
    """

    def __init__(
        self,
        default_ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            default_ttl: TTL in seconds used when put() gets none. Defaults to settings.
            clock: Returns the current time in seconds. Tests pass a fake clock.
        """
        self._entries: dict[str, CacheEntry] = {}
        self._default_ttl = settings.source_cache_ttl if default_ttl is None else default_ttl
        self._clock = clock

    @classmethod
    def create(
        cls,
        default_ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "InMemorySourceCache":
        """Factory method to create InMemorySourceCache with defaults."""
        return cls(default_ttl=default_ttl, clock=clock)

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock()):
            # Expired entries are evicted on read
            self._entries.pop(key, None)
            logger.debug("Cache entry %s expired", key)
            return None

        return entry.value

    def put(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        ttl = self._default_ttl if ttl_seconds is None else ttl_seconds
        self._entries[key] = CacheEntry(key=key, value=value, expires_at=self._clock() + ttl)

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def get_stats(self) -> dict:
        """Get cache statistics.

        Expired entries that were not read yet are still counted.
        """
        return {
            "total_entries": len(self._entries),
            "keys": sorted(self._entries),
            "ttl": self._default_ttl,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
