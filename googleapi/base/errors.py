"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``googleapi.base.errors_parts`` to keep a stable import path.
``CancelledError`` lives with the cancellation primitives and is re-exported
here so every failure kind can be imported from one place.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.googleapi_error import GoogleApiError
from .errors_parts.validation_error import ValidationError
from .errors_parts.signing_error import SigningError
from .errors_parts.transport_error import TransportError, TimedOutError
from .errors_parts.classification import classify_exception
from .cancellation_parts.cancelled_error import CancelledError

__all__ = [
    "ErrorCode",
    "GoogleApiError",
    "ValidationError",
    "SigningError",
    "TransportError",
    "TimedOutError",
    "CancelledError",
    "classify_exception",
]
