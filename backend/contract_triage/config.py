"""Application configuration via environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Report rendering
    REPORT_FORMAT: Literal["simple", "json"] = "simple"

    # HTTP mapping of fatal outcomes
    REQUEST_FAILURE_STATUS: int = 400
    RESPONSE_FAILURE_STATUS: int = 500
    INCLUDE_FINDINGS_IN_RESPONSE: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
