"""googleapi package

Client binding for Google web service APIs (Maps, Custom Search).

Purpose:
    Turn immutable request models into validated, optionally signed query
    URIs and send them over HTTP. URL signing follows Google's premium plan
    scheme (HMAC-SHA1 with URL-safe base64, ``client`` and ``signature``
    appended to the query).

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`GoogleApiError`, :class:`ErrorCode`,
      :class:`ValidationError`, :class:`SigningError`,
      :class:`TransportError`, :class:`TimedOutError`, :class:`CancelledError`
    - Core: :class:`RequestValidator`, :class:`RequestSigner`,
      :class:`SigningCredentials`, :class:`SignedQueryPolicy`, :class:`Outcome`
    - Service: :class:`HttpEngine`, :func:`build_uri`, ``GoogleMaps``,
      ``GoogleSearch``
    - Cancellation: :class:`CancellationToken`
"""

from .base.errors import (
    CancelledError,
    ErrorCode,
    GoogleApiError,
    SigningError,
    TimedOutError,
    TransportError,
    ValidationError,
)
from .base.cancellation import CancellationToken
from .base.result import Outcome
from .signing import RequestSigner, SignedQueryPolicy, SigningCredentials
from .validation import RequestValidator
from .service import GoogleMaps, GoogleSearch, HttpEngine, build_uri

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "GoogleApiError",
    "ErrorCode",
    "ValidationError",
    "SigningError",
    "TransportError",
    "TimedOutError",
    "CancelledError",
    # Core
    "RequestValidator",
    "RequestSigner",
    "SigningCredentials",
    "SignedQueryPolicy",
    "Outcome",
    # Service
    "HttpEngine",
    "build_uri",
    "GoogleMaps",
    "GoogleSearch",
    "CancellationToken",
]
