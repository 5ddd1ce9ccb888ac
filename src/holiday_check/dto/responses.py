"""Response DTOs for API endpoints.

Field names are serialized in camelCase (fromDate, hasOverlap, stateCode, ...).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing snake_case fields as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HolidayItem(CamelModel):
    """A single holiday period overlapping the queried range."""

    name: str = Field(..., description="Display name of the holiday")
    start: str = Field(..., description="First day (DD.MM.YYYY)")
    end: str = Field(..., description="Last day (DD.MM.YYYY)")
    region: str | None = Field(None, description="State or country code of the source")


class RegionItem(CamelModel):
    """Overlapping holidays of one German federal state."""

    state_code: str = Field(..., description="Two-letter state code, e.g. BW")
    state_name: str = Field(..., description="German state name")
    periods: list[HolidayItem] = Field(default_factory=list)


class GermanyResponse(CamelModel):
    """Germany result: holidays grouped by federal state."""

    country_name: str = Field("Deutschland")
    country_code: str = Field("DE")
    has_overlap: bool = Field(..., description="Whether any state has an overlapping holiday")
    regions: list[RegionItem] = Field(
        default_factory=list,
        description="States with at least one overlapping holiday",
    )


class DenmarkResponse(CamelModel):
    """Denmark result: one flat national list."""

    country_name: str = Field("Dänemark")
    country_code: str = Field("DK")
    has_overlap: bool = Field(..., description="Whether any holiday overlaps")
    periods: list[HolidayItem] = Field(default_factory=list)


class QueryEcho(CamelModel):
    """The query as received."""

    from_date: str
    to_date: str
    year: int


class CheckHolidaysResponse(CamelModel):
    """Response DTO for the holiday check operation."""

    query: QueryEcho
    germany: GermanyResponse
    denmark: DenmarkResponse


class ErrorResponse(BaseModel):
    """Error body for 4xx and 5xx responses."""

    error: str = Field(..., description="Human-readable error message")
    details: list[dict[str, Any]] | None = Field(None, description="Validation details")


class StateItem(CamelModel):
    """A German federal state."""

    code: str
    name: str


class CacheStatsResponse(CamelModel):
    """Response DTO for source cache statistics."""

    total_entries: int = Field(..., ge=0)
    ttl_seconds: int = Field(..., ge=0)
    keys: list[str] = Field(default_factory=list)
    german_states: int = Field(..., ge=0)
    denmark_years: list[int] = Field(default_factory=list)
    year_window: list[int] = Field(default_factory=list)


class ClearCacheResponse(CamelModel):
    """Response DTO for clearing the source cache."""

    success: bool
    deleted_count: int = Field(..., ge=0)
    message: str


class HealthCheckResponse(CamelModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_entries: int = Field(..., ge=0)
