import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream holiday source (Germany)
    openholidays_base_url: str = os.getenv("OPENHOLIDAYS_BASE_URL", "https://openholidaysapi.org")
    holiday_language: str = os.getenv("HOLIDAY_LANGUAGE", "DE")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))
    http_user_agent: str = os.getenv("HTTP_USER_AGENT", "Ferienpruefer/1.0")

    # Retry policy: one retry with a linear backoff (seconds x attempt)
    fetch_max_attempts: int = int(os.getenv("FETCH_MAX_ATTEMPTS", "2"))
    fetch_retry_backoff: float = float(os.getenv("FETCH_RETRY_BACKOFF", "0.15"))

    # Source cache
    source_cache_ttl: int = int(os.getenv("SOURCE_CACHE_TTL", "86400"))  # 24 hours

    # Accepted query years
    min_year: int = int(os.getenv("MIN_YEAR", "2024"))
    max_year: int = int(os.getenv("MAX_YEAR", "2030"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def school_holidays_url(self) -> str:
        """Full URL of the OpenHolidays school holiday endpoint."""
        return f"{self.openholidays_base_url.rstrip('/')}/SchoolHolidays"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.min_year > self.max_year:
            raise ValueError(
                f"MIN_YEAR ({self.min_year}) must not be greater than MAX_YEAR ({self.max_year})"
            )

        if self.fetch_max_attempts < 1:
            raise ValueError("FETCH_MAX_ATTEMPTS must be at least 1")

        if self.fetch_retry_backoff < 0:
            raise ValueError("FETCH_RETRY_BACKOFF must not be negative")

        if self.source_cache_ttl < 0:
            raise ValueError("SOURCE_CACHE_TTL must not be negative")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
