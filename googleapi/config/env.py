"""googleapi.config.env
====================

Centralized environment variable mapping and helpers for Google credentials.

Purpose
-------
- Provide a single source of truth for mapping credential fields to their
  environment variable names (canonical and aliases).
- Offer small utilities to look up credentials consistently across the
  package.

Design Notes
------------
- Canonical mapping is defined in ``ENV_MAP``. Some fields have historically
  been published under several names (e.g. ``GOOGLE_MAPS_API_KEY``); list
  those in ``ENV_ALIASES`` with the canonical name first.
- Helpers never raise on unknown fields or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Credential field -> canonical env var
ENV_MAP: Dict[str, str] = {
    "key": "GOOGLE_API_KEY",
    "client_id": "GOOGLE_API_CLIENT_ID",
    "search_engine_id": "GOOGLE_SEARCH_ENGINE_ID",
}


# Credential field -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "key": ("GOOGLE_API_KEY", "GOOGLE_MAPS_API_KEY"),
    "client_id": ("GOOGLE_API_CLIENT_ID", "GOOGLE_MAPS_CLIENT_ID"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(field: str) -> Optional[str]:
    """Return the canonical environment variable name for a credential field."""
    return ENV_MAP.get(field.lower()) if field else None


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield acceptable environment variable names, canonical first."""
    f = (field or "").lower()
    canonical = ENV_MAP.get(f)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(f, ()):  # pragma: no branch - small tuples
        if alias != canonical:
            yield alias


def resolve_credential(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a credential from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        candidate; ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(field):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_credential",
]
