"""Uniform result envelope returned by every analyzer operation."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, model_validator

T = TypeVar("T")


class ResultEnvelope(BaseModel, Generic[T]):
    """
    {success, message, data} wrapper.
    success is True exactly when data is present; failures carry
    an "Error: ..." message and no data.
    """
    success: bool
    message: str
    data: Optional[T] = None

    @model_validator(mode="after")
    def check_success_matches_data(self) -> "ResultEnvelope[T]":
        if self.success and self.data is None:
            raise ValueError("Successful envelope must carry data")
        if not self.success and self.data is not None:
            raise ValueError("Failed envelope must not carry data")
        return self

    @classmethod
    def ok(cls, data: Any, message: str) -> "ResultEnvelope[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: Any) -> "ResultEnvelope[T]":
        return cls(success=False, message=f"Error: {error}", data=None)
