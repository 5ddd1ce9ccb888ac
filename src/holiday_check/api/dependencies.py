"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state, either injected by create_app() or built during lifespan
    - Dependency functions retrieve from request.app.state
    - The source cache is owned by the service, no module-level cache
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from holiday_check.config import settings
from holiday_check.handlers import HolidayHandler
from holiday_check.logging_config import get_logger
from holiday_check.repositories import (
    DenmarkHolidayProvider,
    GermanHolidayProvider,
    InMemorySourceCache,
)
from holiday_check.services import HolidayCheckService

logger = get_logger(__name__)


def get_handler(request: Request) -> HolidayHandler:
    """Dependency injection for HolidayHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "holiday_handler", None)
    if handler is None:
        raise RuntimeError("HolidayHandler not initialized. Check lifespan setup.")
    return handler


def install_service(app: FastAPI, service: HolidayCheckService) -> None:
    """Store a service and its handler in app.state."""
    app.state.holiday_service = service
    app.state.holiday_handler = HolidayHandler(holiday_service=service)


def build_default_service() -> HolidayCheckService:
    """Wire the default layers.

    1. Source cache (24h TTL, in-process)
    2. Providers sharing that cache (OpenHolidays for Germany, bundled table for Denmark)
    3. Service
    """
    cache = InMemorySourceCache.create(default_ttl=settings.source_cache_ttl)
    return HolidayCheckService(
        german_provider=GermanHolidayProvider.create(cache=cache),
        denmark_provider=DenmarkHolidayProvider.create(cache=cache),
        cache=cache,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Builds the default service unless one was injected, and closes the
    HTTP client of the German provider on shutdown.
    """
    created = getattr(app.state, "holiday_service", None) is None
    if created:
        install_service(app, build_default_service())

    service: HolidayCheckService = app.state.holiday_service
    logger.info("Holiday check service initialized")
    logger.info("Germany source: %s", settings.school_holidays_url)
    logger.info("Accepted years: %d-%d", settings.min_year, settings.max_year)

    yield

    if created:
        close = getattr(service.german_provider, "aclose", None)
        if close is not None:
            await close()
        del app.state.holiday_handler
        del app.state.holiday_service
    logger.info("Holiday check service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[HolidayHandler, Depends(get_handler)]