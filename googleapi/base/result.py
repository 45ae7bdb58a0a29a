"""Explicit success/failure values for the validation and signing core.

``RequestValidator.validate`` and ``RequestSigner.sign`` return an
:class:`Outcome` instead of raising, so a caller has to look at ``ok`` (or
call ``unwrap``) before using the value. The error, when present, is always a
typed :class:`GoogleApiError` subclass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors_parts.googleapi_error import GoogleApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the first error encountered.

    Attributes:
        value: Result value when ``error`` is ``None``.
        error: Failure detail; ``None`` on success.
    """

    value: Optional[T] = None
    error: Optional[GoogleApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GoogleApiError) -> "Outcome[T]":
        return cls(error=error)


__all__ = ["Outcome"]
