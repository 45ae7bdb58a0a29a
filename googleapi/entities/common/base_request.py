"""
Immutable base models for Google web service requests.

Purpose
-------
Hold the fields every request shares (API key, premium client id, sensor
flag) and turn a request's field values into a deterministic, ordered list of
query parameters and an unsigned base URI.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` with ``frozen=True``: a request cannot change
  between validation and signing. Use ``model_copy(update=...)`` to derive a
  modified request.

Failure modes
-------------
Construction only enforces types (``pydantic.ValidationError``). Business
rules ("Origins is required.") are reported by ``RequestValidator`` so their
messages stay stable and testable.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

from ...signing.credentials import SigningCredentials
from ...signing.policy import SignedQueryPolicy
from ...validation.rules import ValidationRule

QUERY_SAFE_CHARS = ",|:"


def format_value(value: Any) -> str:
    """Render a field value the way the Google endpoints expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(int(value.timestamp()))
    if isinstance(value, (list, tuple)):
        return "|".join(format_value(v) for v in value)
    return str(value)


def add_param(params: List[Tuple[str, str]], name: str, value: Any) -> None:
    """Append ``(name, value)`` unless the value is unset or empty."""
    if value is None:
        return
    if isinstance(value, (list, tuple)) and not value:
        return
    if isinstance(value, str) and not value:
        return
    params.append((name, format_value(value)))


class BaseRequest(BaseModel):
    """Fields and behaviour shared by all requests.

    Attributes:
        key: API key, sent as ``key=`` on unsigned requests, or the signing
            secret when ``client_id`` is set.
        client_id: Premium client id (``gme-`` prefix) or ``None`` to send
            the request unsigned.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_name: ClassVar[str] = ""
    base_url: ClassVar[str] = ""

    key: Optional[str] = None
    client_id: Optional[str] = None

    def required_fields(self) -> Sequence[ValidationRule]:
        return ()

    def conditional_rules(self) -> Sequence[ValidationRule]:
        return ()

    def api_parameters(self) -> List[Tuple[str, str]]:
        """Parameters specific to the API; overridden by each request shape."""
        return []

    def query_parameters(self) -> List[Tuple[str, str]]:
        params = self.api_parameters()
        add_param(params, "key", self.key)
        return params

    def signing_credentials(self) -> Optional[SigningCredentials]:
        return SigningCredentials.from_request(self)

    def base_uri(
        self,
        policy: Optional[SignedQueryPolicy] = None,
        base_url: Optional[str] = None,
    ) -> str:
        """Return the unsigned URI for this request.

        When the request carries a client id, ``policy`` (default
        :meth:`SignedQueryPolicy.legacy`) decides which parameters remain in
        the query that is about to be signed.
        """
        params = self.query_parameters()
        if self.client_id is not None:
            params = (policy or SignedQueryPolicy.legacy()).apply(params)
        url = base_url or self.base_url
        if not params:
            return url
        return f"{url}?{urlencode(params, safe=QUERY_SAFE_CHARS)}"


class SignableRequest(BaseRequest):
    """A request that may be authenticated by URL signing.

    Attributes:
        sensor: Legacy Maps flag, kept because signed requests historically
            carried it as their only parameter.
    """

    sensor: bool = False

    def query_parameters(self) -> List[Tuple[str, str]]:
        params = self.api_parameters()
        add_param(params, "sensor", self.sensor)
        add_param(params, "key", self.key)
        return params


__all__ = [
    "BaseRequest",
    "SignableRequest",
    "format_value",
    "add_param",
    "QUERY_SAFE_CHARS",
]
