from functools import lru_cache
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # APP
    APP_NAME: str = "Store Dashboard API"
    ENV: str = "development"
    DEBUG: bool = True

    # Database
    DATABASE_URL: str

    # JWT
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_MINUTES: int = 15

    # CORS (comma-separated string in .env)
    CORS_ORIGINS: Optional[str] = None

    # CACHE HTTP
    CACHE_MAX_AGE: int = 60
    CACHE_SWR: int = 300

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: Optional[str] = None

    # Dashboard
    DASHBOARD_TIMEZONE: str = "UTC"
    DASHBOARD_TREND_DAYS: int = 7
    DASHBOARD_ALERT_LIMIT: int = 5
    REPORTS_DEFAULT_DAYS: int = 30

    @field_validator("JWT_SECRET")
    @classmethod
    def _jwt_min_length(cls, v: str) -> str:
        if v is None or len(v) < 32:
            raise ValueError("JWT secret must be at least 32 characters long.")
        return v

    @field_validator("DASHBOARD_TIMEZONE")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    @field_validator("DASHBOARD_TREND_DAYS", "DASHBOARD_ALERT_LIMIT", "REPORTS_DEFAULT_DAYS")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        v = self.CORS_ORIGINS
        if not v:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @property
    def dashboard_tz(self) -> ZoneInfo:
        return ZoneInfo(self.DASHBOARD_TIMEZONE)

    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unknown keys in .env
    )

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
