from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)
    LOG_REJECTIONS: bool = True  # Emit validation.rejected events from boundary validators

    class Config:
        env_prefix = "MINISCHEMA_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
