"""Unified configuration layer.

Goals
-----
* Centralize credential lookup (endpoint and timeout defaults live in
  ``config.defaults``).
* Merge sources in a predictable order:
    1. Optional external config file (JSON or YAML) pointed to by
       ``GOOGLEAPI_CONFIG_FILE``
    2. Environment variables (``GOOGLE_API_KEY``, ``GOOGLE_API_CLIENT_ID``,
       ``GOOGLE_SEARCH_ENGINE_ID``; aliases in ``config.env``)
    3. In-code overrides passed to the helper
* Keep zero hard dependency on PyYAML (load YAML only if available).

External Config File (Optional)
-------------------------------
Structure example::

    key: AIza...
    client_id: gme-mycompany

Public API
----------
* get_api_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional
import json
import os

from .env import ENV_ALIASES, ENV_MAP, is_placeholder, resolve_credential

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _credential_env_names() -> FrozenSet[str]:
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    return frozenset(names)


def _read_dotenv(path: Path) -> Dict[str, str]:
    """Return the ``NAME=value`` pairs of a ``.env`` file.

    Blank lines and ``#`` comments are skipped, an ``export`` prefix is
    accepted and one pair of surrounding quotes is removed from the value.
    """
    pairs: Dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        name, sep, value = line.partition("=")
        name, value = name.strip(), value.strip()
        if not sep or not name or name.startswith("#"):
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        pairs[name] = value
    return pairs


def _load_dotenv_once() -> None:
    """Copy Google credentials from ``.env`` (``DOTENV_FILE``) into the environment.

    Only the credential variables listed in ``config.env`` are taken. A value
    already set in the environment is kept unless it is a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = Path(os.getenv("DOTENV_FILE", ".env"))
    if not path.is_file():
        return
    wanted = _credential_env_names()
    for name, value in _read_dotenv(path).items():
        if name in wanted and (name not in os.environ or is_placeholder(os.environ[name])):
            os.environ[name] = value


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("GOOGLEAPI_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any = {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        if yaml is not None:  # pragma: no cover (depends on optional lib)
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        val, _ = resolve_credential(field)
        if val is not None:
            out[field] = val
    return out


def get_api_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration.

    Merge order (later wins): external config -> env vars -> overrides
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(_load_external_config())
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file contents and ``.env`` load state."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_api_config",
    "reset_config_cache",
]
