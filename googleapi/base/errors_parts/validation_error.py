"""Validation error type.

Raised (or returned inside an ``Outcome``) when a request is structurally
invalid. Always produced before any signing or network I/O.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .googleapi_error import GoogleApiError


class ValidationError(GoogleApiError):
    """A request failed one of its validation rules."""

    def __init__(self, message: str, api: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=message, api=api)


__all__ = ["ValidationError"]
