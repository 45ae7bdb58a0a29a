"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `googleapi.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .googleapi_error import GoogleApiError
from .validation_error import ValidationError
from .signing_error import SigningError
from .transport_error import TransportError, TimedOutError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "GoogleApiError",
    "ValidationError",
    "SigningError",
    "TransportError",
    "TimedOutError",
    "classify_exception",
]
