"""
Base Package

Exports the package-wide contracts used by the request entities and the
query service:

- Errors: typed failures with a normalized ``ErrorCode``
- Outcome: explicit success/failure values from the core
- Interfaces: the request capability protocol
- Timeouts & cancellation: transport controls
- HTTP: pooled clients and the query transport
"""

from .errors import (
    CancelledError,
    ErrorCode,
    GoogleApiError,
    SigningError,
    TimedOutError,
    TransportError,
    ValidationError,
    classify_exception,
)
from .result import Outcome
from .interfaces import GoogleRequest
from .timeouts import TimeoutConfig, get_timeout_config, to_httpx_timeout
from .cancellation import CancellationToken
from .http import HttpTransport, close_all_clients, get_httpx_client

__all__ = [
    # Errors
    "ErrorCode",
    "GoogleApiError",
    "ValidationError",
    "SigningError",
    "TransportError",
    "TimedOutError",
    "CancelledError",
    "classify_exception",
    # Core values
    "Outcome",
    "GoogleRequest",
    # Timeouts & Cancellation
    "TimeoutConfig",
    "get_timeout_config",
    "to_httpx_timeout",
    "CancellationToken",
    # HTTP
    "HttpTransport",
    "get_httpx_client",
    "close_all_clients",
]
