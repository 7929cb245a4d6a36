from __future__ import annotations

"""
Permissive CORS headers for the Spartan ZKP service.

Unlike Starlette's ``CORSMiddleware`` (which only answers requests carrying an
``Origin`` header and short-circuits preflights itself), this service stamps
the same fixed header set on **every** response, and ``OPTIONS /zkp`` is an
ordinary route that returns a JSON acknowledgment.

Headers
-------
    Access-Control-Allow-Origin:  *
    Access-Control-Allow-Methods: GET, POST, OPTIONS
    Access-Control-Allow-Headers: Content-Type, Authorization
    Content-Type:                 application/json

Usage
-----
    from fastapi import FastAPI
    from spartan_zkp.security.cors import setup_cors

    app = FastAPI()
    setup_cors(app)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

JSON_CT = "application/json"


@dataclass(frozen=True)
class CORSConfig:
    allow_origin: str = "*"
    allow_methods: List[str] = field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    allow_headers: List[str] = field(default_factory=lambda: ["Content-Type", "Authorization"])
    # Only sent on the preflight acknowledgment
    max_age: int = 86400

    def headers(self) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": ", ".join(self.allow_methods),
            "Access-Control-Allow-Headers": ", ".join(self.allow_headers),
        }

    def preflight_headers(self) -> Dict[str, str]:
        return {**self.headers(), "Access-Control-Max-Age": str(self.max_age)}


DEFAULT_CORS = CORSConfig()


def cors_headers(config: Optional[CORSConfig] = None) -> Dict[str, str]:
    """CORS header set for responses built outside the middleware stack."""
    return (config or DEFAULT_CORS).headers()


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """
    Adds the fixed CORS headers (and a JSON content type) to every response.
    """

    def __init__(self, app, config: Optional[CORSConfig] = None):
        super().__init__(app)
        self.cfg = config or DEFAULT_CORS

    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)
        for k, v in self.cfg.headers().items():
            response.headers[k] = v
        if "content-type" not in response.headers:
            response.headers["Content-Type"] = JSON_CT
        return response


def setup_cors(app: FastAPI, config: Optional[CORSConfig] = None) -> CORSConfig:
    """Attach :class:`PermissiveCORSMiddleware` to ``app`` and return the config used."""
    cfg = config or DEFAULT_CORS
    app.add_middleware(PermissiveCORSMiddleware, config=cfg)
    return cfg


__all__ = [
    "CORSConfig",
    "DEFAULT_CORS",
    "JSON_CT",
    "PermissiveCORSMiddleware",
    "cors_headers",
    "setup_cors",
]
