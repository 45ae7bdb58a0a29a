"""Unified timeout configuration for HTTP calls.

This module centralizes the timeout values used by the transport layer so no
call site carries ad-hoc numeric literals.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and whenever the relevant variables change. Supported
    environment variables (all optional):
        GOOGLEAPI_TIMEOUT_HTTP_SECONDS
        GOOGLEAPI_TIMEOUT_CONNECT_SECONDS

to_httpx_timeout(seconds)
    Build an ``httpx.Timeout`` from the config, optionally overriding the
    overall value for a single call.

Design Constraints
------------------
1. No hard-coded ad-hoc timeouts outside this module and ``config.defaults``.
2. Avoid per-call env parsing (cache after first read).
3. The signing/validation core never consults timeouts; only transport does.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

import httpx

from ..config.defaults import DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_HTTP_TIMEOUT_SECONDS


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall read/write/pool timeout for a request.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join(
        [
            os.getenv("GOOGLEAPI_TIMEOUT_HTTP_SECONDS", ""),
            os.getenv("GOOGLEAPI_TIMEOUT_CONNECT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(
            "GOOGLEAPI_TIMEOUT_HTTP_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS
        ),
        connect_timeout_seconds=_parse_env_float(
            "GOOGLEAPI_TIMEOUT_CONNECT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS
        ),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def to_httpx_timeout(seconds: Optional[float] = None) -> httpx.Timeout:
    """Return an ``httpx.Timeout`` built from the cached config.

    When ``seconds`` is given it replaces the overall timeout and caps the
    connect timeout for this one call.
    """
    cfg = get_timeout_config()
    overall = cfg.http_timeout_seconds if seconds is None else seconds
    return httpx.Timeout(overall, connect=min(cfg.connect_timeout_seconds, overall))


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "to_httpx_timeout",
]
