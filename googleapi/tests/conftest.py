"""Pytest configuration for the googleapi test suite.

Isolates every test from credentials that may exist in the developer's
environment or a local ``.env`` file, and closes pooled HTTP clients once the
session ends.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Iterator

import pytest

from googleapi.config import reset_config_cache
from googleapi.config.env import ENV_ALIASES, ENV_MAP

SIGNING_KEY = "vNIXE0xscrmjlyV-12Nj_BvUPaw="
CLIENT_ID = "gme-12345"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear Google credential env vars and point config loading at nothing."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("GOOGLEAPI_CONFIG_FILE", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def signing_key() -> str:
    return SIGNING_KEY


@pytest.fixture()
def client_id() -> str:
    return CLIENT_ID


@pytest.fixture(scope="session", autouse=True)
def close_http_clients_after_session() -> Iterator[None]:
    from googleapi.base.http import close_all_clients

    yield
    with suppress(Exception):  # teardown must not fail tests
        close_all_clients()
