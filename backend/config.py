# backend/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    # In-memory SQLite by default; the store lives as long as the process
    DATABASE_URL: str = "sqlite://"

    # Seed account created at bootstrap
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"

    # Dashboard policy
    LOW_STOCK_THRESHOLD: int = 5
    RECENT_TRANSACTIONS_LIMIT: int = 10
    # IANA zone name defining "today"; server local time when unset
    DASHBOARD_TIMEZONE: Optional[str] = None

    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    # Reject unknown zones at startup rather than on the first dashboard request
    @field_validator("DASHBOARD_TIMEZONE")
    @classmethod
    def known_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
