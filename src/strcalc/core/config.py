"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class CalculatorConfig(BaseSettings):
    """Number summing configuration."""

    model_config = {"env_prefix": "STRCALC_CALC_"}

    default_delimiter: str = ","

    @field_validator("default_delimiter")
    @classmethod
    def _reject_unusable_delimiter(cls, value: str) -> str:
        if not value or "\n" in value:
            raise ValueError("default_delimiter must be non-empty and contain no newline")
        return value


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STRCALC_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    calculator: CalculatorConfig = Field(default_factory=CalculatorConfig)
