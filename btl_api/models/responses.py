"""Generic API response envelope model.

All API responses are wrapped in this envelope for consistency:
{ success: bool, data: T, error: str }

Exactly one of ``data`` / ``error`` is present. Absent fields are omitted
from the serialized body rather than emitted as ``null``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_serializer, model_validator

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    success: bool
    data: T | None = None
    error: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def ok(cls, data: T) -> ApiResponse[T]:
        """Wrap a successful payload."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> ApiResponse[T]:
        """Wrap an error message."""
        return cls(success=False, error=message)

    @model_validator(mode="after")
    def _one_of_data_or_error(self) -> ApiResponse[T]:
        if self.success:
            if self.data is None or self.error is not None:
                raise ValueError("success envelope requires data and no error")
        elif self.error is None or self.data is not None:
            raise ValueError("error envelope requires an error and no data")
        return self

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: Any) -> dict[str, Any]:
        payload = handler(self)
        if self.data is None:
            payload.pop("data", None)
        if self.error is None:
            payload.pop("error", None)
        return payload
