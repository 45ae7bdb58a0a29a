"""Signing credential pair.

A request is either fully unsigned (no client id) or fully signed (client id
plus signing key). ``SigningCredentials.from_request`` returns ``None`` for
the unsigned case so the signer can pass the URI through untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class SigningCredentials:
    """Premium-plan signing credentials.

    Attributes:
        client_id: Client identifier issued by Google Enterprise Support.
        key: URL-safe base64 signing secret. Kept out of ``repr``.
    """

    client_id: str
    key: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_request(cls, request: Any) -> Optional["SigningCredentials"]:
        """Build credentials from a request's ``client_id`` and ``key``.

        Returns ``None`` when the request carries no client id.
        """
        client_id = getattr(request, "client_id", None)
        if client_id is None:
            return None
        return cls(client_id=client_id, key=getattr(request, "key", None))


__all__ = ["SigningCredentials"]
