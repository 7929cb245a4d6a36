from __future__ import annotations

"""
Exception → JSON envelope mappers for FastAPI.

- Produces ``{"success": false, "error": ..., "timestamp": ...}`` for:
    * ApiError subclasses (spartan_zkp.errors)
    * Starlette/FastAPI HTTPException (404/405 become RouteNotFound)
    * RequestValidationError (MalformedBody, 422)
    * Unhandled exceptions (500)
- Every envelope carries the CORS headers, including the 500 path which is
  rendered outside the middleware stack.
- Never leaks stack traces in responses; logs them instead.
"""

from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import ApiError, MalformedBody, RouteNotFound, ServerError
from ..logging import get_logger
from ..models.health import ErrorResponse
from ..security.cors import cors_headers

log = get_logger(__name__)


def _envelope_response(request: Request, err: ApiError) -> JSONResponse:
    headers = cors_headers()
    rid = getattr(request.state, "request_id", None)
    if rid:
        headers["X-Request-Id"] = rid
    return JSONResponse(
        status_code=err.status_code,
        content=ErrorResponse.model_validate(err.to_envelope(timestamp=True)).model_dump(),
        headers=headers,
    )


def _log(err: ApiError, request: Request, event: str) -> None:
    fields: Dict[str, Any] = {
        "status": err.status_code,
        "code": err.code,
        "detail": err.message,
        "path": request.url.path,
    }
    if err.details:
        fields["details"] = dict(err.details)
    (log.error if err.status_code >= 500 else log.warning)(event, **fields)


def _summarize_validation(errors: List[Dict[str, Any]]) -> str:
    if not errors:
        return "Malformed request body"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "invalid value")
    return f"Malformed request body: {loc}: {msg}" if loc else f"Malformed request body: {msg}"


# --------------------------- Handlers ---------------------------


async def _handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    _log(exc, request, "api_error")
    return _envelope_response(request, exc)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # No handler for this method+path (405 included)
    if exc.status_code in (404, 405):
        err: ApiError = RouteNotFound(request.method, request.url.path)
    else:
        err = ApiError(
            message=str(exc.detail) if exc.detail else "HTTP error",
            status_code=int(exc.status_code),
            code="http_error",
        )
    _log(err, request, "http_exception")
    return _envelope_response(request, err)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    err = MalformedBody(_summarize_validation(errors), details={"errors": [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in errors
    ]})
    _log(err, request, "validation_error")
    return _envelope_response(request, err)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    err = ServerError("An unexpected error occurred")
    log.exception("unhandled_exception", path=request.url.path, exc_type=exc.__class__.__name__)
    return _envelope_response(request, err)


# --------------------------- Installer ---------------------------


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _handle_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _handle_unexpected_error)


__all__ = ["install_error_handlers"]
