"""
HTTP client for talking to a Spartan ZKP service.

Small async wrapper over ``httpx`` for callers of the service (e.g. an
application back-end that needs proofs):

- ``health()``                    → GET /health
- ``prove(witness, max_balance)`` → POST /zkp {"operation": "prove", ...}
- ``verify(proof, public_inputs)``→ POST /zkp {"operation": "verify", ...}

Notes
-----
* An API key, when configured, is sent as ``Authorization: Bearer <key>``.
* Transport errors and 502/503/504 are retried with exponential backoff.
* An envelope with ``success: false`` raises :class:`ServiceError` carrying
  the HTTP status and the service's ``error`` message.
"""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import httpx
from pydantic import ValidationError

from spartan_zkp.models.health import HealthResponse
from spartan_zkp.models.zkp import Operation, OperationResponse

# ----------------------------- Errors ---------------------------------------


class SpartanClientError(Exception):
    """Base class for all client errors."""


class ServiceTransportError(SpartanClientError):
    """Network/HTTP transport-level error."""


class ServiceError(SpartanClientError):
    """The service answered with ``success: false``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


# ----------------------------- Helpers --------------------------------------

_RETRY_STATUSES = (502, 503, 504)


def _build_headers(api_key: Optional[str]) -> Dict[str, str]:
    hdrs = {
        "content-type": "application/json",
        "accept": "application/json",
    }
    if api_key:
        hdrs["authorization"] = f"Bearer {api_key}"
    return hdrs


# ----------------------------- Client ---------------------------------------


@dataclass
class SpartanClientConfig:
    url: str
    api_key: Optional[str] = None
    timeout_s: float = 30.0
    max_retries: int = 2
    backoff_base_s: float = 0.25  # exponential backoff starting delay


class SpartanClient:
    """
    Minimal async client for the ``/zkp`` and ``/health`` endpoints.
    """

    def __init__(self, config: SpartanClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._cfg = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    # ---------- lifecycle ----------

    async def start(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._cfg.url.rstrip("/"),
                timeout=self._cfg.timeout_s,
                headers=_build_headers(self._cfg.api_key),
                transport=self._transport,
            )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SpartanClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ---------- core transport ----------

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> httpx.Response:
        if self._client is None:
            await self.start()
        assert self._client is not None

        attempt = 0
        while True:
            attempt += 1
            try:
                resp = await self._client.request(method, path, json=payload)
                if resp.status_code in _RETRY_STATUSES:
                    raise ServiceTransportError(f"HTTP {resp.status_code}: {resp.text[:256]!r}")
                return resp
            except (httpx.TransportError, ServiceTransportError) as exc:
                if attempt > self._cfg.max_retries:
                    raise ServiceTransportError(f"{method} {path} failed after {attempt} attempts: {exc}") from exc
                await asyncio.sleep(self._cfg.backoff_base_s * (2 ** (attempt - 1)))

    async def _operation(self, payload: Dict[str, Any]) -> OperationResponse:
        resp = await self._request("POST", "/zkp", payload)
        try:
            body = resp.json()
        except ValueError as e:
            raise ServiceTransportError(f"HTTP {resp.status_code}: response is not JSON") from e

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("error") if isinstance(body, dict) else None
            raise ServiceError(resp.status_code, message or "operation failed")
        try:
            return OperationResponse.model_validate(body)
        except ValidationError as e:
            raise ServiceTransportError(f"unexpected response shape: {e}") from e

    # ---------- typed methods ----------

    async def health(self) -> HealthResponse:
        resp = await self._request("GET", "/health")
        if resp.status_code != 200:
            raise ServiceTransportError(f"health check failed: HTTP {resp.status_code}")
        return HealthResponse.model_validate(resp.json())

    async def prove(self, witness: Sequence[int], max_balance: int) -> OperationResponse:
        return await self._operation(
            {
                "operation": Operation.prove.value,
                "witness_data": [int(w) for w in witness],
                "max_balance": int(max_balance),
            }
        )

    async def verify(self, proof: str, public_inputs: Sequence[str]) -> OperationResponse:
        return await self._operation(
            {
                "operation": Operation.verify.value,
                "proof_data": proof,
                "public_inputs": [str(p) for p in public_inputs],
            }
        )


# ----------------------------- Factory --------------------------------------


def from_env() -> SpartanClient:
    """
    Helper factory: read SPARTAN_SERVICE_URL and optional SPARTAN_API_KEY.
    """
    url = os.environ.get("SPARTAN_SERVICE_URL")
    if not url:
        raise SpartanClientError("SPARTAN_SERVICE_URL is not set in environment")
    return SpartanClient(SpartanClientConfig(url=url, api_key=os.environ.get("SPARTAN_API_KEY") or None))


__all__ = [
    "SpartanClient",
    "SpartanClientConfig",
    "SpartanClientError",
    "ServiceError",
    "ServiceTransportError",
    "from_env",
]
