"""URL signing for premium (client id) requests.

Implements Google's documented URL-signing scheme:

1. The string to sign is the unescaped path, ``?``, the query string exactly
   as given, then ``&client=<client id>``.
2. The signing key is decoded from URL-safe base64.
3. HMAC-SHA1 of the ASCII string to sign is encoded as URL-safe base64 and
   appended as the last parameter, ``&signature=``.

Nothing between steps 1 and 3 may re-encode or reorder the query: a single
changed character invalidates the signature server-side.

The signer holds no mutable state and is safe to share between threads.
"""
from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Optional
from urllib.parse import SplitResult, unquote, urlsplit

from ..base.errors import SigningError
from ..base.logging import get_logger, log_event
from ..base.result import Outcome
from ..config.defaults import CLIENT_ID_PREFIX
from .base64url import from_base64url, to_base64url
from .credentials import SigningCredentials


INVALID_KEY_MESSAGE = "Invalid signing key."


def string_to_sign(parts: SplitResult, client_id: str) -> str:
    """Return the exact URL segment covered by the signature."""
    path = unquote(parts.path)
    if parts.query:
        return f"{path}?{parts.query}&client={client_id}"
    return f"{path}?client={client_id}"


class RequestSigner:
    """Append ``client`` and ``signature`` parameters to a base URI."""

    def __init__(self, client_id_prefix: str = CLIENT_ID_PREFIX) -> None:
        self._client_id_prefix = client_id_prefix
        self._logger = get_logger("googleapi.signing")

    def sign(self, base_uri: str, credentials: Optional[SigningCredentials]) -> Outcome[str]:
        """Sign ``base_uri`` with ``credentials``.

        Returns the unchanged URI when ``credentials`` is ``None``. Checks run
        in this order: missing or blank key, client id prefix, undecodable key.
        A wrong prefix therefore wins over a key that is present but not valid
        base64, while a missing key is still reported as "Invalid signing key."
        even when the prefix is also wrong.

        Raises:
            SigningError: ``base_uri`` is ``None`` (a caller bug, not a
                recoverable outcome).
        """
        if base_uri is None:
            raise SigningError("A base uri is required to sign a request.")
        if credentials is None:
            return Outcome.success(base_uri)

        key = credentials.key
        if key is None or not key.strip():
            return Outcome.failure(SigningError(INVALID_KEY_MESSAGE))
        if not credentials.client_id.startswith(self._client_id_prefix):
            return Outcome.failure(
                SigningError(f"A clientId must start with '{self._client_id_prefix}'.")
            )

        try:
            private_key = from_base64url(key)
        except ValueError:
            return Outcome.failure(SigningError(INVALID_KEY_MESSAGE))

        parts = urlsplit(base_uri)
        segment = string_to_sign(parts, credentials.client_id)
        try:
            payload = segment.encode("ascii")
        except UnicodeEncodeError:
            return Outcome.failure(SigningError("The url to sign must be ASCII."))

        digest = hmac.new(private_key, payload, hashlib.sha1).digest()
        signed = f"{parts.scheme}://{parts.netloc}{segment}&signature={to_base64url(digest)}"
        log_event(
            self._logger,
            "request.sign",
            level=logging.DEBUG,
            client_id=credentials.client_id,
            path=parts.path,
        )
        return Outcome.success(signed)


__all__ = ["RequestSigner", "string_to_sign", "INVALID_KEY_MESSAGE"]
