"""Query engine: validate, build, sign and send a request.

Pipeline for one call::

    request -> RequestValidator.validate -> request.base_uri(policy)
            -> RequestSigner.sign (client id present only) -> HttpTransport

``build_uri`` stops after signing and performs no I/O. Validation and signing
failures are raised as ``ValidationError`` / ``SigningError`` before the
transport is touched; transport failures propagate unchanged.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from ..base.cancellation import CancellationToken
from ..base.errors import GoogleApiError
from ..base.http import HttpTransport
from ..base.logging import get_logger, log_event
from ..base.log_support import LogContext
from ..config import get_api_config
from ..entities.common.base_request import BaseRequest, SignableRequest
from ..signing import RequestSigner, SignedQueryPolicy
from ..validation import RequestValidator

R = TypeVar("R", bound=BaseRequest)

_VALIDATOR = RequestValidator()
_SIGNER = RequestSigner()


def build_uri(
    request: BaseRequest,
    policy: Optional[SignedQueryPolicy] = None,
    base_url: Optional[str] = None,
) -> str:
    """Return the final (signed when applicable) URI for ``request``.

    Raises:
        ValidationError: The request failed one of its rules.
        SigningError: Signing credentials are unusable.
    """
    _VALIDATOR.validate(request).unwrap()
    uri = request.base_uri(policy=policy, base_url=base_url)
    return _SIGNER.sign(uri, request.signing_credentials()).unwrap()


class HttpEngine(Generic[R]):
    """Query facade for one request type.

    Parameters:
        request_type: The request model this engine accepts.
        transport: Transport used for the HTTP call.
        policy: Parameter reduction applied to signed requests.
        use_config_credentials: Fill ``key`` / ``client_id`` from
            :func:`get_api_config` when the request leaves them unset.
    """

    def __init__(
        self,
        request_type: Type[R],
        transport: Optional[HttpTransport] = None,
        *,
        policy: Optional[SignedQueryPolicy] = None,
        use_config_credentials: bool = True,
    ) -> None:
        self.request_type = request_type
        self.transport = transport or HttpTransport()
        self.policy = policy
        self.use_config_credentials = use_config_credentials
        self._logger = get_logger(f"googleapi.engine.{request_type.api_name}")

    def _prepare(self, request: R) -> R:
        if not isinstance(request, self.request_type):
            raise TypeError(
                f"{self.__class__.__name__} for {self.request_type.__name__} "
                f"cannot send {type(request).__name__}"
            )
        if not self.use_config_credentials:
            return request
        cfg = get_api_config()
        update: Dict[str, Any] = {}
        for field in ("key", "client_id", "search_engine_id"):
            if field in self.request_type.model_fields and getattr(request, field) is None and cfg.get(field):
                update[field] = cfg[field]
        if not issubclass(self.request_type, SignableRequest):
            update.pop("client_id", None)
        return request.model_copy(update=update) if update else request

    def build_uri(self, request: R) -> str:
        return build_uri(self._prepare(request), self.policy)

    def _start(self, request: R) -> tuple[str, LogContext]:
        prepared = self._prepare(request)
        ctx = LogContext(
            api=self.request_type.api_name,
            request_id=uuid.uuid4().hex,
            signed=prepared.client_id is not None,
        )
        try:
            uri = build_uri(prepared, self.policy)
        except GoogleApiError as e:
            log_event(self._logger, "query.rejected", ctx, level=logging.INFO, error_code=e.code.value, reason=e.message)
            raise
        return uri, ctx

    def query(self, request: R, *, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Validate, sign and send ``request``; return the JSON body."""
        uri, ctx = self._start(request)
        body = self.transport.send(uri, timeout=timeout, api=ctx.api)
        log_event(self._logger, "query.done", ctx, level=logging.DEBUG, status=body.get("status"))
        return body

    async def query_async(
        self,
        request: R,
        *,
        timeout: Optional[float] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """Awaitable :meth:`query` with timeout and cancellation support."""
        uri, ctx = self._start(request)
        body = await self.transport.send_async(uri, timeout=timeout, cancellation=cancellation, api=ctx.api)
        log_event(self._logger, "query.done", ctx, level=logging.DEBUG, status=body.get("status"))
        return body


__all__ = ["HttpEngine", "build_uri"]
