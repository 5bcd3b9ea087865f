"""
Configuration management for ExpatOS.

Loads settings from environment variables with sensible defaults.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: str = "INFO"

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call the API when debug is off",
    )

    # ==========================================================================
    # Document Store
    # ==========================================================================
    seed_demo_data: bool = Field(
        default=True, description="Seed the in-memory store with the demo fixture"
    )
    documents_file: Path | None = Field(
        default=None, description="Optional JSON file loaded into the store at startup"
    )
    reject_duplicate_types: bool = Field(
        default=False,
        description="Reject document sets holding more than one document of a type",
    )

    @field_validator("documents_file", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v in (None, ""):
            return None
        return Path(v) if isinstance(v, str) else v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | int = "INFO") -> None:
    """Configure structlog to drop events below ``level``."""
    if isinstance(level, str):
        level = logging.getLevelNamesMapping()[level.upper()]

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
