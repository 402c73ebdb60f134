"""Application configuration utilities.

Settings are read from environment variables (and an optional ``.env``
file) and act as defaults for the CLI; explicit command-line flags win.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application settings loaded from the environment.

    Notes
    -----
    - Environment variables use the ``CAST_PROFILES_`` prefix
      (e.g. ``CAST_PROFILES_DEVICE=google-tv-4k``).
    - ``device_file`` takes precedence over ``device`` when both are set.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAST_PROFILES_",
        env_file=".env",
        extra="ignore",
    )

    device: str = Field(
        default="chromecast-ultra",
        description="Built-in device preset used when no device is given",
    )
    device_file: Path | None = Field(
        default=None,
        description="JSON device description used instead of a preset",
    )
    debug: bool = Field(default=False, description="Enable debug logging")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache application settings.

    Cached with ``functools.lru_cache(maxsize=1)`` so the process shares a
    single settings instance.  Tests call ``get_settings.cache_clear()``
    after changing the environment.
    """
    return Settings()
