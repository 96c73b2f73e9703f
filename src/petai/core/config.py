"""
Process-level settings.

Loads settings from environment variables and .env file.
Prefix: PET_

Provider selection and credentials are resolved separately by
petai.llm.config so they can be computed from any environment snapshot.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level name"
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Get a fresh settings instance."""
    return Settings()


def load_environ(env_file: Path | str = ".env") -> dict[str, str]:
    """Snapshot the environment, with .env values under real variables."""
    file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
    return {**file_values, **os.environ}
