"""Source cache protocol.

Defines the interface for the keyed, TTL-based memoization of upstream
holiday data. Providers receive an implementation through their
constructor, so tests can pass a cache driven by a fake clock.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SourceCache(Protocol):
    """Protocol for source caches.

    Keys follow the "<COUNTRY>_<REGION?>_<YEAR>" convention,
    e.g. "DE_BW_2025" or "DK_2025".
    """

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if absent or expired.

        Args:
            key: The cache key

        Returns:
            The cached value or None
        """
        ...

    def put(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store a value, replacing any existing entry for the key.

        Args:
            key: The cache key
            value: The value to store
            ttl_seconds: Time-to-live in seconds. Defaults to the cache's TTL.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete an entry.

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def clear(self) -> int:
        """Remove all entries.

        Returns:
            Number of entries removed
        """
        ...

    def get_stats(self) -> dict:
        """Get cache statistics."""
        ...
