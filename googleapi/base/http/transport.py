"""HTTP transport for signed/unsigned query URIs.

The transport is the only part of the package that performs I/O. It sends a
finished URI with ``GET`` and returns the decoded JSON body.

Failure mapping
---------------
- ``httpx.TimeoutException`` or an elapsed per-call timeout ->
  :class:`TimedOutError`
- cancellation through a :class:`CancellationToken` -> :class:`CancelledError`
- non-2xx status, network and protocol errors, undecodable bodies ->
  :class:`TransportError` (``code`` refined by :func:`classify_exception`)

The transport never retries.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..errors import ErrorCode, TimedOutError, TransportError, classify_exception
from ..logging import get_logger, log_event
from ..log_support import LogContext
from ..timeouts import get_timeout_config, to_httpx_timeout
from .client import get_httpx_client

TIMED_OUT_MESSAGE = "The operation has timed out."
CANCELLED_MESSAGE = "The operation was canceled."


class HttpTransport:
    """Blocking and awaitable ``GET`` of a query URI.

    Parameters:
        client: Optional ``httpx.Client`` for blocking calls; defaults to the
            shared pool.
        async_client: Optional ``httpx.AsyncClient`` for awaitable calls; a
            short-lived client is created per call when omitted.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
        *,
        purpose: str = "query",
    ) -> None:
        self._client = client
        self._async_client = async_client
        self._purpose = purpose
        self._logger = get_logger("googleapi.transport")

    def send(self, uri: str, *, timeout: Optional[float] = None, api: Optional[str] = None) -> Dict[str, Any]:
        """Send ``uri`` and return the decoded JSON body."""
        ctx = LogContext(api=api)
        client = self._client or get_httpx_client(None, self._purpose)
        log_event(self._logger, "query.send", ctx, level=logging.DEBUG, path=urlsplit(uri).path)
        try:
            response = client.get(uri, timeout=to_httpx_timeout(timeout))
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise self._timed_out(ctx, api, e) from e
        except httpx.HTTPError as e:
            raise self._transport_error(ctx, api, e) from e
        return self._decode(response, api)

    async def send_async(
        self,
        uri: str,
        *,
        timeout: Optional[float] = None,
        cancellation: Optional[CancellationToken] = None,
        api: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Await ``uri`` and return the decoded JSON body.

        ``timeout`` bounds the whole call (defaults to the configured HTTP
        timeout). Cancelling ``cancellation`` from any thread aborts the call
        with :class:`CancelledError`.
        """
        ctx = LogContext(api=api)
        if cancellation is not None and cancellation.cancelled:
            raise CancelledError(cancellation.reason or CANCELLED_MESSAGE, api=api)

        seconds = get_timeout_config().http_timeout_seconds if timeout is None else timeout
        log_event(self._logger, "query.send", ctx, level=logging.DEBUG, path=urlsplit(uri).path, mode="async")

        task = asyncio.ensure_future(self._get_async(uri, seconds))
        remove_callback = None
        if cancellation is not None:
            loop = asyncio.get_running_loop()
            remove_callback = cancellation.add_callback(lambda: loop.call_soon_threadsafe(task.cancel))
        try:
            response = await task
            response.raise_for_status()
        except asyncio.CancelledError:
            if cancellation is not None and cancellation.cancelled:
                log_event(self._logger, "query.cancelled", ctx, level=logging.INFO)
                raise CancelledError(cancellation.reason or CANCELLED_MESSAGE, api=api) from None
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise self._timed_out(ctx, api, e) from e
        except httpx.HTTPError as e:
            raise self._transport_error(ctx, api, e) from e
        finally:
            if remove_callback is not None:
                remove_callback()
        return self._decode(response, api)

    async def _get_async(self, uri: str, seconds: float) -> httpx.Response:
        if self._async_client is not None:
            return await asyncio.wait_for(
                self._async_client.get(uri, timeout=to_httpx_timeout(seconds)), seconds
            )
        async with httpx.AsyncClient(timeout=to_httpx_timeout(seconds)) as client:
            return await asyncio.wait_for(client.get(uri), seconds)

    def _timed_out(self, ctx: LogContext, api: Optional[str], exc: BaseException) -> TimedOutError:
        log_event(self._logger, "query.timeout", ctx, level=logging.WARNING, error_code=ErrorCode.TIMEOUT.value)
        return TimedOutError(TIMED_OUT_MESSAGE, api=api, raw=exc)

    def _transport_error(self, ctx: LogContext, api: Optional[str], exc: httpx.HTTPError) -> TransportError:
        code = classify_exception(exc)
        status = None
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            message = f"Request failed with status {status}."
        else:
            message = str(exc) or exc.__class__.__name__
        log_event(
            self._logger,
            "query.error",
            ctx,
            level=logging.WARNING,
            error_code=code.value,
            status_code=status,
        )
        return TransportError(message, api=api, code=code, status_code=status, raw=exc)

    def _decode(self, response: httpx.Response, api: Optional[str]) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError("Response body is not valid JSON.", api=api, raw=e) from e
        if not isinstance(body, dict):
            raise TransportError("Response body is not a JSON object.", api=api)
        return body


__all__ = ["HttpTransport", "TIMED_OUT_MESSAGE", "CANCELLED_MESSAGE"]
