"""Signing error type.

Covers malformed signing credentials (bad key, bad client id prefix) and
missing signing input (no base URI).
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .googleapi_error import GoogleApiError


class SigningError(GoogleApiError):
    """Signing credentials are present but cannot be used."""

    def __init__(self, message: str, api: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.SIGNING, message=message, api=api)


__all__ = ["SigningError"]
