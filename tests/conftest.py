from __future__ import annotations

from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from spartan_zkp.app import create_app
from spartan_zkp.config import Settings
from spartan_zkp.services.dispatcher import OperationDispatcher
from spartan_zkp.services.prover import ProofGenerator
from spartan_zkp.services.verifier import ProofVerifier


# ----------------------------
# Settings & dispatcher
# ----------------------------
@pytest.fixture
def settings() -> Settings:
    """Test settings: defaults for bind, no artificial delays, no .env lookup."""
    return Settings(prove_delay_ms=0, verify_delay_ms=0, _env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def dispatcher() -> OperationDispatcher:
    """Zero-delay dispatcher so HTTP tests don't sleep."""
    return OperationDispatcher(generator=ProofGenerator(delay_s=0), verifier=ProofVerifier(delay_s=0))


# ----------------------------
# FastAPI application fixtures
# ----------------------------
@pytest.fixture
def app(settings: Settings, dispatcher: OperationDispatcher) -> FastAPI:
    return create_app(settings, dispatcher=dispatcher)


@pytest_asyncio.fixture
async def aclient(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """
    Async HTTP client bound to the ASGI app; no server is started.
    """
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


# ----------------------------
# Payload helpers
# ----------------------------
@pytest.fixture
def prove_body() -> dict:
    return {"operation": "prove", "witness_data": [100, 2500, 99999], "max_balance": 100000}


def assert_cors(resp: httpx.Response) -> None:
    assert resp.headers.get("access-control-allow-origin") == "*"
    assert resp.headers.get("access-control-allow-methods") == "GET, POST, OPTIONS"
    assert resp.headers.get("access-control-allow-headers") == "Content-Type, Authorization"
    assert resp.headers.get("content-type", "").startswith("application/json")
