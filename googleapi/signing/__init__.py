"""Request signing: credentials, query reduction policy and the signer."""

from .base64url import from_base64url, to_base64url
from .credentials import SigningCredentials
from .policy import SignedQueryPolicy
from .signer import RequestSigner, string_to_sign

__all__ = [
    "RequestSigner",
    "SigningCredentials",
    "SignedQueryPolicy",
    "string_to_sign",
    "to_base64url",
    "from_base64url",
]
