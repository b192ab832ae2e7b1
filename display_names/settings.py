"""Adapter configuration, loaded from ``DISPLAY_NAMES_*`` environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DisplayNameGeneration, Style


class Settings(BaseSettings):
    """Settings for the CLI and the pytest hook.

    The defaults here apply only to groupings that declare nothing. Naming
    calls made directly through ``display_names.dispatch`` always treat a
    missing declaration as the DEFAULT style.
    """

    model_config = SettingsConfigDict(
        env_prefix="DISPLAY_NAMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_style: Optional[Style] = None
    default_generator: Optional[str] = None
    use_docstrings: bool = True
    log_level: str = "WARNING"

    @field_validator("default_style", mode="before")
    @classmethod
    def _parse_style(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Style):
            return Style.parse(value) if value.strip() else None
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def default_generation(self) -> Optional[DisplayNameGeneration]:
        """Declaration applied to groupings without one, None if unconfigured."""
        if self.default_generator:
            return DisplayNameGeneration(generator=self.default_generator)
        if self.default_style is not None:
            return DisplayNameGeneration(style=self.default_style)
        return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton settings (cached after first call)."""
    return Settings()
