from __future__ import annotations

"""
Access logging middleware.

One structured ``access`` event per request with method, path, status,
latency_ms, client_ip, user_agent and the request id set by
``RequestIdMiddleware``. 4xx responses log at warning, 5xx at error.
"""

import time

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..logging import get_logger

log = get_logger("access")


def _client_ip(request: Request) -> str:
    # Prefer X-Forwarded-For (first hop), then X-Real-IP, then ASGI client addr
    fwd = request.headers.get("x-forwarded-for")
    if fwd:
        return fwd.split(",")[0].strip()
    real = request.headers.get("x-real-ip")
    if real:
        return real.strip()
    if request.client:
        return request.client.host
    return ""


def _level_for_status(status: int) -> str:
    if status >= 500:
        return "error"
    if status >= 400:
        return "warning"
    return "info"


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        start_ns = time.perf_counter_ns()
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": _client_ip(request),
            "user_agent": request.headers.get("user-agent", ""),
            "request_id": getattr(request.state, "request_id", ""),
        }
        try:
            response = await call_next(request)
        except Exception:
            latency_ms = (time.perf_counter_ns() - start_ns) / 1e6
            log.exception("access", status=500, latency_ms=round(latency_ms, 3), **fields)
            raise

        latency_ms = (time.perf_counter_ns() - start_ns) / 1e6
        status = response.status_code
        getattr(log, _level_for_status(status))(
            "access", status=status, latency_ms=round(latency_ms, 3), **fields
        )
        return response


def install_access_log_middleware(app: FastAPI) -> None:
    app.add_middleware(AccessLogMiddleware)


__all__ = ["AccessLogMiddleware", "install_access_log_middleware"]
