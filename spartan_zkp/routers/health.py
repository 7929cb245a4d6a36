from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from spartan_zkp.models.health import HealthResponse
from spartan_zkp.version import SERVICE_NAME, __version__

log = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

_PROCESS_START = time.time()


def _uptime_seconds() -> float:
    return max(0.0, time.time() - _PROCESS_START)


def _health() -> HealthResponse:
    return HealthResponse(
        service=SERVICE_NAME,
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime_seconds=round(_uptime_seconds(), 3),
    )


@router.get("/", summary="Root health status", response_model=HealthResponse)
async def root() -> HealthResponse:
    log.debug("root endpoint accessed")
    return _health()


@router.get("/health", summary="Health check", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe: always 200 while the process is serving requests.
    """
    log.debug("health endpoint accessed")
    return _health()


def get_router() -> APIRouter:
    return router
