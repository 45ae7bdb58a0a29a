"""Transport error types.

These originate outside the signing/validation core. ``TimedOutError`` is kept
distinct from cancellation so callers can react to each separately.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .googleapi_error import GoogleApiError


class TransportError(GoogleApiError):
    """The HTTP call failed (connection, protocol or non-2xx status).

    ``status_code`` is set when the server answered; ``code`` is refined from
    it by :func:`classify_exception` (e.g. 403 -> ``auth``).
    """

    def __init__(
        self,
        message: str,
        api: Optional[str] = None,
        *,
        code: ErrorCode = ErrorCode.TRANSPORT,
        status_code: Optional[int] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(code=code, message=message, api=api, raw=raw)
        self.status_code = status_code


class TimedOutError(GoogleApiError):
    """The HTTP call did not complete within its timeout."""

    def __init__(
        self, message: str, api: Optional[str] = None, raw: Optional[BaseException] = None
    ) -> None:
        super().__init__(code=ErrorCode.TIMEOUT, message=message, api=api, raw=raw)


__all__ = ["TransportError", "TimedOutError"]
