from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres connection string)
      - AUTH_JWT_SECRET (signing secret shared with the identity provider)

    Optional:
      - SESSION_COOKIE_NAME (cookie carrying the session token)
      - CORS_ORIGINS (JSON list of allowed origins)
      - LOG_LEVEL
    """

    PROJECT_NAME: str = "Medi Link API"
    API_PREFIX: str = "/api"

    DATABASE_URL: str

    # Session token verification (backend-side)
    AUTH_JWT_SECRET: str
    AUTH_JWT_ALG: str = "HS256"
    SESSION_COOKIE_NAME: str = "medilink_session"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
