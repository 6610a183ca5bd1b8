"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Nurse Vacation Planner"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = 8490

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "vacation_planner"
    db_user: str = "vacation_planner"
    db_password: str = ""
    database_url: Optional[str] = None

    # Connection pool settings
    db_pool_size: int = 10
    db_pool_max_overflow: int = 10
    db_pool_timeout: int = 30

    # Segment rules
    max_segments: int = 4  # including the segment being validated
    min_segment_days: int = 7
    pto_segment_days: int = 7
    days_per_week: int = 7  # converts a nurse's weeks off into days

    # Staffing lookups only consider events starting this many weeks
    # (plus one day) before the day being counted
    staffing_lookback_weeks: int = 6

    # Holiday window runs from start (in the anchor year) to end (next year)
    holiday_start_month: int = 12
    holiday_start_day: int = 20
    holiday_end_month: int = 1
    holiday_end_day: int = 2

    # Used when the current_years table has no row yet
    default_current_year: Optional[int] = None

    @property
    def async_database_url(self) -> str:
        """Build async database URL for SQLAlchemy."""
        if self.database_url:
            # Convert standard postgres:// to postgresql+asyncpg://
            url = self.database_url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def sync_database_url(self) -> str:
        """Build sync database URL for Alembic migrations."""
        if self.database_url:
            url = self.database_url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql://", 1)
            return url

        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def staffing_range_buffer_days(self) -> int:
        """Days to look back from a counted day when fetching candidate events."""
        return self.staffing_lookback_weeks * self.days_per_week + 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
