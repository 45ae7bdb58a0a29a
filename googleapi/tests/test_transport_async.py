"""Awaitable transport: completion, timeout and cancellation.

Each test drives its own event loop with ``asyncio.run``.
"""

from __future__ import annotations

import asyncio
import threading

import httpx
import pytest

from googleapi.base.cancellation import CancellationToken
from googleapi.base.errors import CancelledError, ErrorCode, TimedOutError, TransportError
from googleapi.base.http import HttpTransport
from googleapi.entities.maps import GeocodeRequest
from googleapi.service import HttpEngine

URI = "https://maps.googleapis.com/maps/api/geocode/json?address=test&sensor=false"


def _transport(handler) -> HttpTransport:
    return HttpTransport(async_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


async def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"status": "OK"})


async def _slow(request: httpx.Request) -> httpx.Response:
    await asyncio.sleep(5)
    return httpx.Response(200, json={"status": "OK"})


def test_send_async_returns_body():
    body = asyncio.run(_transport(_ok).send_async(URI, timeout=1.0))
    assert body == {"status": "OK"}


def test_send_async_times_out():
    with pytest.raises(TimedOutError, match="The operation has timed out.") as info:
        asyncio.run(_transport(_slow).send_async(URI, timeout=0.05, api="geocode"))
    assert info.value.code is ErrorCode.TIMEOUT
    assert info.value.api == "geocode"


def test_cancel_in_flight_request():
    token = CancellationToken()

    async def run():
        asyncio.get_running_loop().call_later(0.05, token.cancel)
        return await _transport(_slow).send_async(URI, timeout=2.0, cancellation=token)

    with pytest.raises(CancelledError, match="The operation was canceled.") as info:
        asyncio.run(run())
    assert info.value.code is ErrorCode.CANCELLED


def test_cancel_from_another_thread():
    token = CancellationToken()
    timer = threading.Timer(0.05, token.cancel, kwargs={"reason": "user abort"})

    async def run():
        timer.start()
        return await _transport(_slow).send_async(URI, timeout=2.0, cancellation=token)

    try:
        with pytest.raises(CancelledError, match="user abort"):
            asyncio.run(run())
    finally:
        timer.cancel()


def test_already_cancelled_token_skips_request():
    calls = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    token = CancellationToken()
    token.cancel()
    with pytest.raises(CancelledError):
        asyncio.run(_transport(handler).send_async(URI, cancellation=token))
    assert calls == []


def test_cancelled_and_timed_out_are_distinct():
    assert not issubclass(CancelledError, TimedOutError)
    assert not issubclass(TimedOutError, CancelledError)


def test_async_status_error_is_transport_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json={})

    with pytest.raises(TransportError) as info:
        asyncio.run(_transport(handler).send_async(URI))
    assert info.value.code is ErrorCode.UNAVAILABLE
    assert info.value.status_code == 502


def test_engine_query_async(signing_key, client_id):
    seen = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "OK"})

    engine = HttpEngine(GeocodeRequest, _transport(handler))
    request = GeocodeRequest(address="test", key=signing_key, client_id=client_id)
    body = asyncio.run(engine.query_async(request, timeout=1.0, cancellation=CancellationToken()))

    assert body == {"status": "OK"}
    assert seen[0].url.params["signature"] == "HDjNwmq8D3o0uOx7s-U9dIQDt-0="
