"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The API key comes from the environment or .env (never hardcoded beyond a placeholder)
    - get_settings() is cached (lru_cache), single instance per process
    - The API host is not configurable; see core/request_builder.BASE_URL
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # OpenAI
    openai_api_key: str = "sk-placeholder"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
