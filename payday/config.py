"""Configuration management using Pydantic Settings"""

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_payments_file() -> Path:
    """Payment file under the XDG config directory (~/.config/payday/payments.yml)"""
    config_home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config_home) / "payday" / "payments.yml"


class Settings(BaseSettings):
    """Application configuration loaded from PAYDAY_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="PAYDAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    payments_file: Path = Field(default_factory=default_payments_file)

    # Projection
    default_reference_day: int = Field(default=18, ge=1, le=31)

    # Display
    currency_symbol: str = "£"

    # Editor command, falls back to $VISUAL / $EDITOR / vi
    editor: Optional[str] = None

    # Service
    service_name: str = "payday"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
