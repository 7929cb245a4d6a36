from __future__ import annotations

"""
Request ID & tracing middleware.

- Generates or propagates a stable **X-Request-Id** for every request.
- Supports the W3C **traceparent** header: an inbound trace-id is preserved
  with a fresh span-id; otherwise a new trace is started.
- Exposes ``request.state.request_id`` / ``trace_id`` / ``span_id``.
- Binds the ids into structlog contextvars for the duration of the request.

Request/trace IDs are *not secrets*; they are safe to echo in logs and headers.
"""

import re
import secrets
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..logging import bind_request_context, clear_request_context

_TRACEPARENT_RE = re.compile(
    r"^(?P<ver>[0-9a-f]{2})-(?P<trace_id>[0-9a-f]{32})-(?P<span_id>[0-9a-f]{16})-(?P<flags>[0-9a-f]{2})$"
)

_CTX_KEYS = ("request_id", "trace_id", "span_id")


def parse_traceparent(value: str) -> Optional[Tuple[str, str, str]]:
    """
    Parse W3C traceparent. Returns (trace_id, parent_span_id, flags) if valid, else None.
    """
    m = _TRACEPARENT_RE.match(value.strip())
    if not m:
        return None
    trace_id = m.group("trace_id")
    span_id = m.group("span_id")
    # All-zero ids are invalid
    if trace_id == "0" * 32 or span_id == "0" * 16:
        return None
    return trace_id, span_id, m.group("flags")


def format_traceparent(trace_id: str, span_id: str, flags: str = "01") -> str:
    return f"00-{trace_id}-{span_id}-{flags}"


@dataclass(frozen=True)
class RequestIdConfig:
    request_id_header: str = "X-Request-Id"
    traceparent_header: str = "traceparent"


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, config: Optional[RequestIdConfig] = None):
        super().__init__(app)
        self.cfg = config or RequestIdConfig()

    async def dispatch(self, request: Request, call_next) -> Response:
        req_id = request.headers.get(self.cfg.request_id_header.lower()) or uuid.uuid4().hex

        parent = request.headers.get(self.cfg.traceparent_header.lower())
        parsed = parse_traceparent(parent) if parent else None
        if parsed:
            trace_id, _parent_span, flags = parsed
        else:
            trace_id, flags = secrets.token_hex(16), "01"
        span_id = secrets.token_hex(8)

        request.state.request_id = req_id
        request.state.trace_id = trace_id
        request.state.span_id = span_id

        bind_request_context(request_id=req_id, trace_id=trace_id, span_id=span_id)
        try:
            response: Response = await call_next(request)
        finally:
            clear_request_context(*_CTX_KEYS)

        response.headers[self.cfg.request_id_header] = req_id
        response.headers[self.cfg.traceparent_header] = format_traceparent(trace_id, span_id, flags)
        return response


__all__ = [
    "RequestIdConfig",
    "RequestIdMiddleware",
    "format_traceparent",
    "parse_traceparent",
]
