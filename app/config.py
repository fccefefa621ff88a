from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.streak_util import resolve_timezone


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Buildu Goals API"
    API_VERSION: str = "1.0.0"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # full URL wins over the POSTGRES_* parts, tests point it at sqlite
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "buildu"

    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    FRONTEND_URL: str = "http://localhost:5173"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # day boundaries for streaks are taken in this zone
    STREAK_TIMEZONE: str = "UTC"
    STREAK_LOOKBACK_DAYS: int = 366
    RECENT_ACTIVITY_LIMIT: int = 10

    @field_validator("STREAK_TIMEZONE")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        # an unknown zone stops the app from loading its settings
        resolve_timezone(value)
        return value

    @property
    def database_url(self) -> str:
        """
        Returns the SQLAlchemy URL for the configured database.

        Returns:
            str: DATABASE_URL when set, otherwise a psycopg URL built from the
            POSTGRES_* settings.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def allowed_origins(self) -> List[str]:
        origins = [self.FRONTEND_URL]
        origins.extend(o for o in self.CORS_ORIGINS if o not in origins)
        return origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
