"""Exception hierarchy for the holiday check service.

Handlers map these to HTTP responses:
    - QueryValidationError -> 400
    - HolidayServiceError  -> 500 (generic message only)

UpstreamError never leaves the provider layer; the retry loop absorbs it.
"""

from typing import Any


class HolidayCheckError(Exception):
    """Base class for all holiday check errors."""


class QueryValidationError(HolidayCheckError):
    """The caller's query is invalid and no data was fetched."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class DateParseError(QueryValidationError):
    """A date string is not a real calendar date in DD.MM.YYYY format."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Invalid date '{text}': expected a real calendar date in DD.MM.YYYY format",
        )
        self.text = text


class HolidayServiceError(HolidayCheckError):
    """Unexpected failure while assembling a check result."""


class UpstreamError(HolidayCheckError):
    """A single attempt to fetch holidays from a remote source failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
