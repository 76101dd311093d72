# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Every value can be overridden with an environment variable of the same
    name (case-insensitive) or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite:///./worktime.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]
    session_cookie_name: str = "session"

    # Holiday calendar
    holiday_country: str = "IT"
    holiday_subdivision: str | None = None
    # Extra fixed-date holidays as "MM-DD" -> name, e.g. a local patron saint
    extra_holidays: dict[str, str] = Field(default_factory=dict)

    # Working-day rules
    standard_daily_hours: float = 8.0
    half_shift_permission_hours: float = 4.0
    edit_grace_days: int = 5

    # Leave caps
    special_leave_monthly_cap_hours: float = 24.0
    parental_leave_lifetime_cap_days: int = 10


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()


settings = get_settings()
