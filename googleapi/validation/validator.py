"""First-failure-wins request validation.

The validator walks a request's ``required_fields()`` and then its
``conditional_rules()`` in declaration order and stops at the first rule that
fails. It performs no I/O and keeps no state between calls.
"""
from __future__ import annotations

import logging
from itertools import chain
from typing import Any

from ..base.logging import get_logger, log_event
from ..base.result import Outcome


class RequestValidator:
    """Check a request against its declared rules."""

    def __init__(self) -> None:
        self._logger = get_logger("googleapi.validation")

    def validate(self, request: Any) -> Outcome[None]:
        """Return success, or a failure carrying the first ``ValidationError``."""
        if request is None:
            raise TypeError("request must not be None")
        api = getattr(request, "api_name", None)
        for rule in chain(request.required_fields(), request.conditional_rules()):
            error = rule.check(request, api=api)
            if error is not None:
                log_event(
                    self._logger,
                    "request.invalid",
                    level=logging.DEBUG,
                    api=api,
                    reason=error.message,
                )
                return Outcome.failure(error)
        return Outcome.success(None)


__all__ = ["RequestValidator"]
