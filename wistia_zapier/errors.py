"""Failures surfaced to the end user by the host."""
from __future__ import annotations

from typing import Optional


class AppError(Exception):
    """A failure whose message is shown to the user as-is."""

    def __init__(self, message: str, code: str = "AppError", status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status


class AuthenticationError(AppError):
    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message, code="AuthenticationError", status=status)


class ResponseError(AppError):
    """Raised by ``Response.throw_for_status`` for non-2xx responses."""

    def __init__(self, message: str, status: int, content: str) -> None:
        super().__init__(message, code="ResponseError", status=status)
        self.content = content
