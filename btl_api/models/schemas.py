"""Payload models carried inside the response envelope."""

from __future__ import annotations

from pydantic import BaseModel


class HealthInfo(BaseModel):
    """Health check payload reflecting the running build."""

    status: str = "healthy"
    version: str


class RootInfo(BaseModel):
    """Service description returned from the API root."""

    name: str
    version: str
    endpoints: list[str]
