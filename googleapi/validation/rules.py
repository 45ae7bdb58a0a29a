"""Validation rules over request field values.

A :class:`ValidationRule` pairs a predicate with the message reported when
the predicate does not hold. Requests declare their rules through
``required_fields()`` and ``conditional_rules()``; the factories below cover
the shapes the Google APIs need:

- :func:`required`: a field must be set (``None``, a blank string and an
  empty collection all count as unset and share one message).
- :func:`required_one_of`: at least one of several fields must be set.
- :func:`required_when`: when a discriminant field takes a given value, at
  least one of the alternative fields must be set.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from ..base.errors import ValidationError

Predicate = Callable[[Any], bool]


def is_unset(value: Any) -> bool:
    """Return True for ``None``, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def display_name(field: str) -> str:
    """``departure_time`` -> ``DepartureTime``."""
    return "".join(part.capitalize() for part in field.split("_"))


def display_value(value: Any) -> str:
    """``TravelMode.TRANSIT`` -> ``Transit``; other values via ``str``."""
    if isinstance(value, Enum):
        return "".join(part.capitalize() for part in value.name.split("_"))
    return str(value)


@dataclass(frozen=True)
class ValidationRule:
    """A predicate (True means valid) plus its failure message."""

    predicate: Predicate
    message: str

    def check(self, request: Any, api: Optional[str] = None) -> Optional[ValidationError]:
        """Return a ``ValidationError`` if the rule fails, else ``None``."""
        if self.predicate(request):
            return None
        return ValidationError(self.message, api=api)


def required(field: str, display: Optional[str] = None) -> ValidationRule:
    name = display or display_name(field)
    return ValidationRule(
        predicate=lambda request: not is_unset(getattr(request, field, None)),
        message=f"{name} is required.",
    )


def required_one_of(
    fields: Sequence[str], displays: Optional[Sequence[str]] = None
) -> ValidationRule:
    names = list(displays) if displays else [display_name(f) for f in fields]
    return ValidationRule(
        predicate=lambda request: any(not is_unset(getattr(request, f, None)) for f in fields),
        message=f"{' or '.join(names)} is required.",
    )


def required_when(
    discriminant: str,
    value: Any,
    alternatives: Sequence[str],
    *,
    displays: Optional[Sequence[str]] = None,
    discriminant_display: Optional[str] = None,
) -> ValidationRule:
    """Require one of ``alternatives`` when ``discriminant == value``.

    Message shape: ``"A or B is required, when Discriminant is Value."``
    """
    names = list(displays) if displays else [display_name(f) for f in alternatives]
    disc = discriminant_display or display_name(discriminant)

    def _predicate(request: Any) -> bool:
        if getattr(request, discriminant, None) != value:
            return True
        return any(not is_unset(getattr(request, f, None)) for f in alternatives)

    return ValidationRule(
        predicate=_predicate,
        message=f"{' or '.join(names)} is required, when {disc} is {display_value(value)}.",
    )


__all__ = [
    "ValidationRule",
    "Predicate",
    "is_unset",
    "display_name",
    "display_value",
    "required",
    "required_one_of",
    "required_when",
]
