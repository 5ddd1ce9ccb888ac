"""School Holiday Check - date range overlap with German and Danish school holidays.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (SourceCache, StateHolidayProvider, CountryHolidayProvider)
    - repositories: Holiday sources and the in-memory source cache
    - services: Overlap resolution and holiday name translation
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)
    - utils: Date parsing, formatting and interval overlap

Usage:
    ```python
    from holiday_check.services import HolidayCheckService

    service = HolidayCheckService.create()
    result = await service.check_holidays("01.07.2025", "31.07.2025", 2025)
    ```

For HTTP API:
    ```python
    from holiday_check.api.app import app
    ```
"""

from holiday_check.config import settings
from holiday_check.dto import CheckHolidaysRequest, CheckHolidaysResponse
from holiday_check.entities import CheckResult, HolidayPeriod, RegionEntry
from holiday_check.exceptions import (
    DateParseError,
    HolidayCheckError,
    HolidayServiceError,
    QueryValidationError,
)
from holiday_check.handlers import HolidayHandler
from holiday_check.protocols import CountryHolidayProvider, SourceCache, StateHolidayProvider
from holiday_check.repositories import (
    DenmarkHolidayProvider,
    GermanHolidayProvider,
    InMemorySourceCache,
)
from holiday_check.services import HolidayCheckService, translate_holiday_name

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CountryHolidayProvider",
    "SourceCache",
    "StateHolidayProvider",
    # Services (business logic)
    "HolidayCheckService",
    "translate_holiday_name",
    # Handlers (HTTP)
    "HolidayHandler",
    # Repositories (data access)
    "DenmarkHolidayProvider",
    "GermanHolidayProvider",
    "InMemorySourceCache",
    # Entities (domain models)
    "CheckResult",
    "HolidayPeriod",
    "RegionEntry",
    # DTOs (API contracts)
    "CheckHolidaysRequest",
    "CheckHolidaysResponse",
    # Errors
    "DateParseError",
    "HolidayCheckError",
    "HolidayServiceError",
    "QueryValidationError",
]
