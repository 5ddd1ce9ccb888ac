from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from holiday_check.api.dependencies import HandlerDep, install_service, lifespan
from holiday_check.config import settings
from holiday_check.dto import (
    CacheStatsResponse,
    CheckHolidaysRequest,
    CheckHolidaysResponse,
    ClearCacheResponse,
    ErrorResponse,
    HealthCheckResponse,
    StateItem,
)
from holiday_check.exceptions import HolidayServiceError, QueryValidationError
from holiday_check.logging_config import get_logger, setup_logging
from holiday_check.services import HolidayCheckService

logger = get_logger(__name__)

SERVICE_ERROR_MESSAGE = (
    "Fehler beim Abrufen der Feriendaten. Bitte versuchen Sie es später erneut."
)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 instead of FastAPI's 422."""
    details = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    body = ErrorResponse(error="Invalid request data", details=details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def query_validation_error_handler(
    request: Request, exc: QueryValidationError
) -> JSONResponse:
    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def service_error_handler(request: Request, exc: HolidayServiceError) -> JSONResponse:
    body = ErrorResponse(error=SERVICE_ERROR_MESSAGE)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )


def create_app(holiday_service: HolidayCheckService | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        holiday_service: Service to serve requests with. If None, the
            lifespan builds the default service on startup.

    Returns:
        The configured FastAPI app
    """
    setup_logging(settings.log_level)

    app = FastAPI(
        title="School Holiday Check API",
        description="Checks a date range against German and Danish school holidays",
        version="0.1.0",
        lifespan=lifespan,
    )

    if holiday_service is not None:
        install_service(app, holiday_service)

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(QueryValidationError, query_validation_error_handler)
    app.add_exception_handler(HolidayServiceError, service_error_handler)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "School Holiday Check API",
            "version": "0.1.0",
            "description": "Checks a date range against German and Danish school holidays",
            "endpoints": {
                "check": "/api/check-holidays",
                "states": "/api/states",
                "stats": "/cache/stats",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.post(
        "/api/check-holidays",
        response_model=CheckHolidaysResponse,
        responses={
            400: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    async def check_holidays(
        request: CheckHolidaysRequest, handler: HandlerDep
    ) -> CheckHolidaysResponse:
        """
        Check a date range against school holidays in Germany and Denmark.

        Args:
            request: fromDate and toDate (DD.MM.YYYY) plus the year they lie in.

        Returns:
            Overlapping holidays per German state and for Denmark.
        """
        return await handler.check_holidays(request)

    @app.get("/api/states", response_model=list[StateItem])
    async def list_states(handler: HandlerDep) -> list[StateItem]:
        """List the German federal states that are checked."""
        return await handler.list_states()

    @app.get("/cache/stats", response_model=CacheStatsResponse)
    async def cache_stats(handler: HandlerDep) -> CacheStatsResponse:
        """Get source cache statistics."""
        return await handler.get_stats()

    @app.delete("/cache", response_model=ClearCacheResponse)
    async def clear_cache(handler: HandlerDep) -> ClearCacheResponse:
        """Clear all cached holiday data."""
        return await handler.clear_cache()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "holiday_check.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
