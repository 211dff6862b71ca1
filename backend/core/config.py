"""
Application configuration.

All settings can be overridden through environment variables or a `.env`
file in the working directory. Restaurant rules (capacity, service windows,
booking window) live here so they are not hardcoded in the services.
"""

from datetime import datetime, time
from functools import lru_cache
from typing import List, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


WEEKDAY_NAMES = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database Configuration
    database_url: str = "sqlite:///./smart_restaurant.db"
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # Environment Settings
    app_name: str = "Smart Restaurant API"
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    log_sql_queries: bool = False
    slow_query_threshold_seconds: float = 1.0

    # Kept as a comma separated string, see `cors_origin_list`
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Reservation rules
    restaurant_capacity: int = 50
    lead_time_minutes: int = 120
    slot_interval_minutes: int = 30
    service_windows: str = "11:00-14:30,17:00-21:30"
    closed_weekday: str = "monday"
    max_party_size: int = 20
    advance_booking_days: int = 60

    # When False, status updates overwrite unconditionally
    enforce_status_transitions: bool = False

    # Accounts
    min_password_length: int = 8

    @field_validator("closed_weekday")
    @classmethod
    def validate_closed_weekday(cls, v):
        day = v.strip().lower()
        if day not in WEEKDAY_NAMES:
            raise ValueError(f"closed_weekday must be one of {', '.join(WEEKDAY_NAMES)}")
        return day

    @field_validator("service_windows")
    @classmethod
    def validate_service_windows(cls, v):
        # Fails early on a malformed window instead of at the first request
        _parse_windows(v)
        return v

    @field_validator("restaurant_capacity", "max_party_size", "slot_interval_minutes")
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def closed_weekday_index(self) -> int:
        """Weekday number as returned by `date.weekday()` (Monday is 0)."""
        return WEEKDAY_NAMES.index(self.closed_weekday)

    @property
    def service_window_times(self) -> List[Tuple[time, time]]:
        return _parse_windows(self.service_windows)


def _parse_windows(raw: str) -> List[Tuple[time, time]]:
    windows = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            start_raw, end_raw = chunk.split("-")
            start = datetime.strptime(start_raw.strip(), "%H:%M").time()
            end = datetime.strptime(end_raw.strip(), "%H:%M").time()
        except ValueError:
            raise ValueError(f"Invalid service window '{chunk}', expected HH:MM-HH:MM")
        if end < start:
            raise ValueError(f"Service window '{chunk}' ends before it starts")
        windows.append((start, end))
    if not windows:
        raise ValueError("At least one service window is required")
    return windows


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()


def validate_production_config(settings: Settings) -> None:
    """Validate configuration for production deployment."""
    if not settings.is_production:
        return

    issues = []
    if settings.debug:
        issues.append("DEBUG is enabled in production")
    if settings.database_url.startswith("sqlite"):
        issues.append("SQLite database configured in production")

    if issues:
        raise ValueError(f"Production configuration issues detected: {', '.join(issues)}")
