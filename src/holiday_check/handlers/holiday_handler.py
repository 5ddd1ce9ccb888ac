"""HTTP handlers for holiday check operations.

Handlers convert between DTOs (API contracts) and service calls.
Domain exceptions are left to the app's exception handlers, which turn
them into 400 / 500 error bodies.
"""

from holiday_check.dto import (
    CacheStatsResponse,
    CheckHolidaysRequest,
    CheckHolidaysResponse,
    ClearCacheResponse,
    DenmarkResponse,
    GermanyResponse,
    HealthCheckResponse,
    HolidayItem,
    QueryEcho,
    RegionItem,
    StateItem,
)
from holiday_check.entities import CheckResult, HolidayPeriod
from holiday_check.logging_config import get_logger
from holiday_check.services import HolidayCheckService
from holiday_check.utils import format_date

logger = get_logger(__name__)


def _holiday_item(period: HolidayPeriod) -> HolidayItem:
    return HolidayItem(
        name=period.name,
        start=format_date(period.start),
        end=format_date(period.end),
        region=period.region,
    )


def to_response(result: CheckResult) -> CheckHolidaysResponse:
    """Convert a CheckResult entity to its response DTO."""
    germany = result.germany
    denmark = result.denmark

    return CheckHolidaysResponse(
        query=QueryEcho(
            from_date=result.query.from_date,
            to_date=result.query.to_date,
            year=result.query.year,
        ),
        germany=GermanyResponse(
            country_name=germany.country_name,
            country_code=germany.country_code,
            has_overlap=germany.has_overlap,
            regions=[
                RegionItem(
                    state_code=region.state_code,
                    state_name=region.state_name,
                    periods=[_holiday_item(period) for period in region.periods],
                )
                for region in germany.regions
            ],
        ),
        denmark=DenmarkResponse(
            country_name=denmark.country_name,
            country_code=denmark.country_code,
            has_overlap=denmark.has_overlap,
            periods=[_holiday_item(period) for period in denmark.periods],
        ),
    )


class HolidayHandler:
    """HTTP handlers for holiday check operations.

    Example:
        ```python
        service = HolidayCheckService.create()
        handler = HolidayHandler(holiday_service=service)

        @app.post("/api/check-holidays", response_model=CheckHolidaysResponse)
        async def check_holidays(request: CheckHolidaysRequest):
            return await handler.check_holidays(request)
        ```
    """

    def __init__(self, holiday_service: HolidayCheckService) -> None:
        """Initialize the holiday handler.

        Args:
            holiday_service: The holiday check service (required).
        """
        self._service = holiday_service

    async def check_holidays(self, request: CheckHolidaysRequest) -> CheckHolidaysResponse:
        """Handle POST /api/check-holidays requests.

        Raises:
            QueryValidationError: If the dates are invalid for the declared year (-> 400)
            HolidayServiceError: If the check failed unexpectedly (-> 500)
        """
        result = await self._service.check_holidays(
            from_date=request.from_date,
            to_date=request.to_date,
            year=request.year,
        )
        logger.info(
            "Checked %s - %s: %d German states, %d Danish holidays overlap",
            request.from_date,
            request.to_date,
            len(result.germany.regions),
            len(result.denmark.periods),
        )
        return to_response(result)

    async def list_states(self) -> list[StateItem]:
        """Handle GET /api/states requests."""
        return [StateItem(code=state.code, name=state.name) for state in self._service.states]

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        stats = self._service.get_stats()
        return CacheStatsResponse(
            total_entries=stats.get("total_entries", 0),
            ttl_seconds=stats.get("ttl", 0),
            keys=stats.get("keys", []),
            german_states=stats.get("german_states", 0),
            denmark_years=stats.get("denmark_years", []),
            year_window=stats.get("year_window", []),
        )

    async def clear_cache(self) -> ClearCacheResponse:
        """Handle DELETE /cache requests."""
        count = self._service.clear_cache()
        return ClearCacheResponse(
            success=True,
            deleted_count=count,
            message="Cache cleared successfully",
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._service.is_healthy()
        cache_entries = self._service.get_stats().get("total_entries", 0) if is_healthy else 0
        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_entries=cache_entries,
        )
