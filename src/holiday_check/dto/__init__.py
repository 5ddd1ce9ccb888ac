"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CheckHolidaysRequest
from .responses import (
    CacheStatsResponse,
    CheckHolidaysResponse,
    ClearCacheResponse,
    DenmarkResponse,
    ErrorResponse,
    GermanyResponse,
    HealthCheckResponse,
    HolidayItem,
    QueryEcho,
    RegionItem,
    StateItem,
)

__all__ = [
    "CheckHolidaysRequest",
    "CacheStatsResponse",
    "CheckHolidaysResponse",
    "ClearCacheResponse",
    "DenmarkResponse",
    "ErrorResponse",
    "GermanyResponse",
    "HealthCheckResponse",
    "HolidayItem",
    "QueryEcho",
    "RegionItem",
    "StateItem",
]
