"""
Normalized error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every `GoogleApiError`. Values
are lowercase snake_case and are considered a stable public contract for
logging and caller-side dispatch.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    SIGNING = "signing"
    TRANSPORT = "transport"
    BAD_REQUEST = "bad_request"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
