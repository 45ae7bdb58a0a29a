from __future__ import annotations

import pytest

from googleapi.base.timeouts import TimeoutConfig, get_timeout_config, to_httpx_timeout


def test_defaults(monkeypatch):
    monkeypatch.delenv("GOOGLEAPI_TIMEOUT_HTTP_SECONDS", raising=False)
    monkeypatch.delenv("GOOGLEAPI_TIMEOUT_CONNECT_SECONDS", raising=False)
    assert get_timeout_config() == TimeoutConfig(http_timeout_seconds=30.0, connect_timeout_seconds=10.0)


def test_env_override_is_picked_up(monkeypatch):
    monkeypatch.setenv("GOOGLEAPI_TIMEOUT_HTTP_SECONDS", "5")
    monkeypatch.setenv("GOOGLEAPI_TIMEOUT_CONNECT_SECONDS", "2.5")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 5.0
    assert cfg.connect_timeout_seconds == 2.5


@pytest.mark.parametrize("raw", ["0", "-3", "soon"])
def test_invalid_env_values_fall_back(monkeypatch, raw):
    monkeypatch.setenv("GOOGLEAPI_TIMEOUT_HTTP_SECONDS", raw)
    assert get_timeout_config().http_timeout_seconds == 30.0


def test_per_call_override_caps_connect(monkeypatch):
    monkeypatch.delenv("GOOGLEAPI_TIMEOUT_HTTP_SECONDS", raising=False)
    monkeypatch.delenv("GOOGLEAPI_TIMEOUT_CONNECT_SECONDS", raising=False)
    timeout = to_httpx_timeout(2.0)
    assert timeout.read == 2.0
    assert timeout.connect == 2.0
    default = to_httpx_timeout()
    assert default.read == 30.0 and default.connect == 10.0
