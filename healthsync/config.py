"""
Centralised config for the HealthSync dashboard core.

All tunable thresholds, intervals and storage locations live here. Values are
loaded from a `.env` file or environment variables and exposed through a
singleton `settings` object.
"""

import os
from urllib.parse import quote_plus
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings.

    Pydantic's BaseSettings will automatically load values from a `.env` file
    or from system environment variables, so the same code runs unchanged in
    a demo setup and in production.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=False)

    # --- CORE SETTINGS ---
    PROJECT_ROOT: Path = Path(__file__).parent.parent.resolve()
    ENVIRONMENT: str = "development"

    # --- NOTIFICATIONS (optional) ---
    TELEGRAM_TOKEN: Optional[str] = None
    TELEGRAM_CHAT_ID: Optional[str] = None

    # --- DATABASE (optional) ---
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: Optional[int] = 5432
    POSTGRES_DB: Optional[str] = None
    DATABASE_URL: Optional[str] = Field(None, validate_default=True)

    # --- INSIGHT THRESHOLDS ---
    SLEEP_SHORT_HOURS: float = 6.0
    SLEEP_TARGET_HOURS: float = 7.0
    WATER_HALFWAY_GLASSES: int = 4
    WATER_GOAL_GLASSES: int = 8
    STEPS_WALK_THRESHOLD: int = 3000

    # --- DEFAULTS FOR MISSING VALUES ---
    DEFAULT_SLEEP_HOURS: float = 6.2
    DEFAULT_ACTIVITY_MULTIPLIER: float = 1.2
    BMR_ASSUMED_AGE: int = 25  # fixed demo assumption, see DESIGN.md

    # --- RETENTION ---
    ACTIVITY_LOG_LIMIT: int = Field(50, ge=1)
    MOOD_LOG_LIMIT: int = Field(200, ge=1)

    # --- HYDRATION CHALLENGE ---
    HYDRATION_CHALLENGE_DAYS: int = 7
    HYDRATION_CHALLENGE_DEFAULT: int = 3

    # --- TIMERS (seconds) ---
    INSIGHT_REFRESH_SECONDS: float = 60
    STEPS_WALK_SECONDS: float = 45
    HEARTBEAT_SECONDS: float = 2.5
    BREATHING_TICK_SECONDS: float = 0.6
    BREATHING_DURATION_SECONDS: int = 60
    WATER_REMINDER_SECONDS: float = 2 * 60 * 60
    DEMO_MODE_SHORT_REMINDER: bool = True
    DEMO_WATER_REMINDER_SECONDS: float = 2 * 60

    # --- DAILY CHECKLIST ---
    CHECKLIST_ITEMS: List[str] = ["water", "walk", "stretch", "sleep", "meditate"]

    def __init__(self, **values):
        super().__init__(**values)
        # An explicit DATABASE_URL wins; otherwise build one from the parts.
        if self.DATABASE_URL:
            return
        db_host = os.getenv("DB_HOST_OVERRIDE", self.POSTGRES_HOST)
        if self.POSTGRES_USER and self.POSTGRES_PASSWORD and db_host and self.POSTGRES_DB:
            # URL-encode user/pass to support special characters like @ and #
            user_enc = quote_plus(self.POSTGRES_USER)
            pass_enc = quote_plus(self.POSTGRES_PASSWORD)
            self.DATABASE_URL = (
                f"postgresql://{user_enc}:{pass_enc}@{db_host}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )

    @property
    def water_reminder_interval(self) -> float:
        """Effective reminder interval; demo mode shortens it to two minutes."""
        if self.DEMO_MODE_SHORT_REMINDER:
            return self.DEMO_WATER_REMINDER_SECONDS
        return self.WATER_REMINDER_SECONDS

    # --- FILE PATHS (derived from PROJECT_ROOT) ---
    @property
    def log_path(self) -> Path:
        return self.PROJECT_ROOT / "logs/healthsync.log"

    @property
    def store_path(self) -> Path:
        return self.PROJECT_ROOT / "data/store"


# Create a single, importable instance of the settings
settings = Settings()
