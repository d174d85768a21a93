import json

from pydantic_settings import BaseSettings

from app.core.constants import (
    DEFAULT_ANALYTICS_WINDOW_DAYS,
    DEFAULT_RANKINGS_LIMIT,
    DEFAULT_STORE_QUERY_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    DATABASE_URL: str

    BACKEND_CORS_ORIGINS: str = '["http://localhost:5173","http://localhost:3000"]'

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Trip Planner Admin Statistics API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Size of the top cities / top activities rankings
    STATS_RANKING_LIMIT: int = DEFAULT_RANKINGS_LIMIT
    # Trailing window for the trips-by-day analytics
    ANALYTICS_WINDOW_DAYS: int = DEFAULT_ANALYTICS_WINDOW_DAYS
    # Upper bound for a single read against the store
    STORE_QUERY_TIMEOUT_SECONDS: float = DEFAULT_STORE_QUERY_TIMEOUT_SECONDS

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:5173", "http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS


settings = Settings()
