from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Theater Booking API"
    PROJECT_VERSION: str = "0.1.0"
    PROJECT_DESCRIPTION: str = "API for booking movie theater seats"
    ENV: str = Field(default="development", description="Environment of the application like development, production, etc.")
    API_V1_PREFIX: str = "/api/v1"
    LIFECYCLE_TICK_SECONDS: float = Field(default=60, gt=0, description="Interval between movie status scans")
    LOG_LEVEL: str = Field(default="INFO", description="Minimum level written by the log sink")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


settings = Settings()


@lru_cache
def get_settings() -> Settings:
    return settings
