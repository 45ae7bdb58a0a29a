"""Request validation: rule factories and the validator."""

from .rules import (
    ValidationRule,
    is_unset,
    required,
    required_one_of,
    required_when,
)
from .validator import RequestValidator

__all__ = [
    "RequestValidator",
    "ValidationRule",
    "is_unset",
    "required",
    "required_one_of",
    "required_when",
]
