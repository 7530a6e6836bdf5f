"""Structured (one JSON object per line) logging.

Rate lookups are the interesting events here, so the formatter promotes the
lookup fields passed via ``extra=`` (source/target codes, rate, url, attempt,
error) to top-level JSON keys. Every line also carries the id of the HTTP
request it belongs to, or "-" outside a request.
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, IO, Optional

LOOKUP_FIELDS = ("source", "target", "rate", "url", "attempt", "error")
REQUEST_ID_HEADER = "x-request-id"

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        for field in LOOKUP_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def init_logging(debug: bool = False, stream: Optional[IO[str]] = None) -> None:
    """Route everything through a single JSON handler on the root logger."""
    level = logging.DEBUG if debug else logging.INFO
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


async def request_context_middleware(request, call_next):  # type: ignore
    """Tag log lines emitted while serving a request with its id.

    A client-supplied x-request-id is reused and echoed back on the response.
    """
    rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    token = request_id_ctx.set(rid)
    try:
        response = await call_next(request)
    finally:
        request_id_ctx.reset(token)
    response.headers[REQUEST_ID_HEADER] = rid
    return response
