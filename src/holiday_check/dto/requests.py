"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from holiday_check.config import settings

DATE_REGEX = r"^[0-9]{2}\.[0-9]{2}\.[0-9]{4}$"


class CheckHolidaysRequest(BaseModel):
    """Request DTO for checking a date range against school holidays.

    Only the shape is validated here; calendar validity and the
    relation between the dates and the year are checked by the service.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    from_date: str = Field(
        ...,
        description="First day of the range (DD.MM.YYYY)",
        pattern=DATE_REGEX,
        examples=["01.07.2025"],
    )
    to_date: str = Field(
        ...,
        description="Last day of the range (DD.MM.YYYY)",
        pattern=DATE_REGEX,
        examples=["31.07.2025"],
    )
    year: int = Field(
        ...,
        description="Year both dates lie in",
        ge=settings.min_year,
        le=settings.max_year,
        strict=True,
    )
