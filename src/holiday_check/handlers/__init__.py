"""HTTP handlers layer.

Handlers convert between DTOs and service calls.
"""

from .holiday_handler import HolidayHandler, to_response

__all__ = [
    "HolidayHandler",
    "to_response",
]
