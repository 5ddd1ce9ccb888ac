"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Providers -> Source Cache / upstream
    (HTTP)  -> (Overlap) -> (Data Access)

Usage:
    ```python
    from holiday_check.services import HolidayCheckService

    # Using factory method (recommended)
    service = HolidayCheckService.create()

    # Or manual creation
    service = HolidayCheckService(german_provider=de, denmark_provider=dk)
    ```
"""

from .holiday_check_service import HolidayCheckService
from .name_translator import translate_holiday_name

__all__ = [
    "HolidayCheckService",
    "translate_holiday_name",
]
