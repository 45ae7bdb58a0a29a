"""Request capability interface.

Every concrete request shape implements :class:`GoogleRequest`. The
validation and signing core only talks to requests through this protocol, so
new APIs are added as data-only models without touching the core.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..validation.rules import ValidationRule


@runtime_checkable
class GoogleRequest(Protocol):
    """Capabilities a request exposes to validation, signing and transport.

    Attributes:
        api_name: Short API identifier used in errors and logs.
        base_url: Endpoint URL without a query string.
        key: API key (unsigned requests) or signing secret (signed requests).
        client_id: Premium client id; ``None`` means the request is unsigned.
    """

    api_name: str
    base_url: str
    key: Optional[str]
    client_id: Optional[str]

    def required_fields(self) -> Sequence["ValidationRule"]:
        """Rules for fields that must be set, in reporting order."""
        ...

    def conditional_rules(self) -> Sequence["ValidationRule"]:
        """Cross-field rules evaluated after the required fields."""
        ...

    def query_parameters(self) -> List[Tuple[str, str]]:
        """Ordered ``(name, value)`` pairs derived from the field values."""
        ...


__all__ = ["GoogleRequest"]
