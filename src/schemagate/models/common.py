"""Common response envelope shared by every endpoint."""

import time
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _now_millis() -> int:
    return int(time.time() * 1000)


class ApiResponse(BaseModel, Generic[T]):
    """``{code, message, data, timestamp}`` envelope; ``code`` mirrors the HTTP status."""

    code: int
    message: str
    data: T | None = None
    timestamp: int = Field(default_factory=_now_millis)
    trace_id: str | None = None

    @classmethod
    def success(cls, data: Any = None, message: str = "success") -> "ApiResponse":
        return cls(code=200, message=message, data=data)

    @classmethod
    def error(cls, message: str, code: int = 400, data: Any = None) -> "ApiResponse":
        return cls(code=code, message=message, data=data)

    @classmethod
    def server_error(cls, message: str) -> "ApiResponse":
        return cls.error(message, code=500)
