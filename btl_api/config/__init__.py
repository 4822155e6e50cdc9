"""Configuration module — environment-backed settings."""

from btl_api.config.settings import ApiSettings

__all__ = ["ApiSettings"]
