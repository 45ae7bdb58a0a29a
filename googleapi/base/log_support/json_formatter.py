"""JSON logging formatter used by the package logging setup.

:class:`JsonFormatter` renders one JSON object per record. Messages produced
by ``log_event`` are already JSON objects; their keys (``event``, ``api``,
``request_id`` ...) are merged into the top level instead of being nested as
an escaped string. Attributes passed through ``extra=`` are kept too.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attribute names every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


def _event_payload(text: str) -> Optional[Dict[str, Any]]:
    if not text.startswith("{"):
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON.

    Top-level keys: ``ts`` (record creation time, UTC), ``level``, ``logger``,
    then either the hoisted event payload or ``msg``, then extras and ``exc``.
    """

    def format(self, record: logging.LogRecord) -> str:
        out: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        payload = _event_payload(text)
        if payload is None:
            out["msg"] = text
        else:
            out.update(payload)
        for name, value in vars(record).items():
            if name.startswith("_") or name in _RECORD_ATTRS:
                continue
            out.setdefault(name, value)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
