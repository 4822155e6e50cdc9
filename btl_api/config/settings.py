"""Pydantic Settings for the btl.run API.

All environment variables use the BTL_ prefix.
Example: BTL_LOG_LEVEL=debug, BTL_VERSION=0.2.0
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

from btl_api import __version__


class ApiSettings(BaseSettings):
    """API configuration validated from environment variables."""

    # Service
    service_name: str = "btl.run API"
    version: str = __version__  # Baked in at build time, overridable at startup

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "BTL_", "frozen": True}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level
