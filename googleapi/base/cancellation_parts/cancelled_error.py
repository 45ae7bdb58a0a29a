"""Cancellation error type.

Defines the public ``CancelledError`` used to signal that an in-flight call
was cancelled through a :class:`CancellationToken`. Kept isolated to satisfy
one-class-per-file policy.
"""

from __future__ import annotations

from typing import Optional

from ..errors_parts.error_code import ErrorCode
from ..errors_parts.googleapi_error import GoogleApiError


class CancelledError(GoogleApiError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from :class:`asyncio.CancelledError` (which is translated into
    this type at the transport boundary) and from ``TimedOutError``.
    """

    def __init__(self, message: str = "operation cancelled", api: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CANCELLED, message=message, api=api)


__all__ = ["CancelledError"]
