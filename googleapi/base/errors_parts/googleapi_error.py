"""
Structured error exception type.

Every failure surfaced by the package is a `GoogleApiError` carrying a
normalized `ErrorCode`, so callers can tell validation, signing and transport
failures apart without parsing messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class GoogleApiError(Exception):
    """Represents a structured error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Stable, human-readable message. Consumers assert on it
            verbatim, so wording changes are breaking changes.
        api: Optional API name where the error originated (e.g.
            ``"distancematrix"``).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    api: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        return self.message


__all__ = ["GoogleApiError"]
