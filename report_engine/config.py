"""
Configuration settings for the Campus Report Engine.

Uses Pydantic Settings to load environment variables for the record API,
logging, and report output defaults.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Record API
    api_url: str = Field("http://localhost:8000", alias="API_URL")
    api_token: Optional[str] = Field(None, alias="API_TOKEN")
    http_timeout_seconds: float = Field(10.0, alias="HTTP_TIMEOUT_SECONDS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Report defaults
    report_title: str = Field("Smart Campus Report", alias="REPORT_TITLE")
    report_output_path: str = Field("report.pdf", alias="REPORT_OUTPUT_PATH")
    default_lookback_days: int = Field(30, alias="DEFAULT_LOOKBACK_DAYS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
