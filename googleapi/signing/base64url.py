"""URL-safe base64 helpers used by request signing.

Google issues signing keys in the "modified" base64 alphabet (``-`` and
``_`` in place of ``+`` and ``/``) and expects the signature in the same
alphabet. Padding (``=``) is kept on output.
"""
from __future__ import annotations

import base64


def to_base64url(data: bytes) -> str:
    """Encode ``data`` as standard base64 then translate ``+``/``/`` to ``-``/``_``."""
    if data is None:
        raise TypeError("data must not be None")
    return base64.b64encode(data).decode("ascii").replace("+", "-").replace("/", "_")


def from_base64url(value: str) -> bytes:
    """Decode a URL-safe base64 string.

    Raises:
        ValueError: When ``value`` is not valid base64 after translation
            (``binascii.Error`` is a ``ValueError`` subclass).
    """
    if value is None:
        raise TypeError("value must not be None")
    return base64.b64decode(value.replace("-", "+").replace("_", "/"), validate=True)


__all__ = ["to_base64url", "from_base64url"]
