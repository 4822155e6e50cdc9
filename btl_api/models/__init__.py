"""Public models for the btl.run API."""

from btl_api.models.responses import ApiResponse
from btl_api.models.schemas import HealthInfo, RootInfo

__all__ = [
    "ApiResponse",
    "HealthInfo",
    "RootInfo",
]
