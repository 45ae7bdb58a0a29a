"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation constructs via the canonical
``googleapi.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is passed to ``query_async`` to abort an in-flight
  HTTP call from another task or thread.
- ``CancelledError`` is raised by operations that observe a cancellation
  request. It is a ``GoogleApiError`` with code ``cancelled``.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
