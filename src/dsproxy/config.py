"""Configuration management for dsproxy."""

from __future__ import annotations

from typing import Any

from pydantic import Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BOOL = TypeAdapter(bool)
LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Process-wide settings, read once from the environment at startup."""

    model_config = SettingsConfigDict(env_prefix="DSP_", case_sensitive=False, extra="ignore")

    debug: bool = Field(default=False, description="Trace argument vectors to stderr")
    vmtoolsd: str = Field(default="", description="Absolute path of the real daemon binary")
    log_level: str = Field(default="DEBUG", description="Level of the trace sink when debug is on")

    @field_validator("debug", mode="before")
    @classmethod
    def _lenient_bool(cls, value: Any) -> bool:
        # Anything that does not parse as a boolean leaves debugging off.
        try:
            return _BOOL.validate_python(value)
        except ValidationError:
            return False

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> str:
        # Unknown level names keep the trace at DEBUG rather than failing startup.
        level = str(value).strip().upper()
        return level if level in LOG_LEVELS else "DEBUG"


def load_settings() -> Settings:
    """Load settings from ``DSP_*`` environment variables."""

    return Settings()
