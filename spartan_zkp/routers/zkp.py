from __future__ import annotations

"""
ZKP Routers

Endpoints:
  - POST    /zkp : run a ``prove`` or ``verify`` operation
  - OPTIONS /zkp : CORS preflight acknowledgment (no operation performed)

These are thin shims over `spartan_zkp.services.dispatcher`.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from spartan_zkp.models.health import PreflightResponse
from spartan_zkp.models.zkp import OperationRequest, OperationResponse
from spartan_zkp.security.cors import DEFAULT_CORS
from spartan_zkp.services.dispatcher import OperationDispatcher

log = logging.getLogger(__name__)
router = APIRouter(tags=["zkp"])


def get_dispatcher(request: Request) -> OperationDispatcher:
    return request.app.state.dispatcher


@router.post(
    "/zkp",
    summary="Run a prove/verify operation",
    response_model=OperationResponse,
    response_model_exclude_none=True,
)
async def post_zkp(
    req: OperationRequest,
    dispatcher: OperationDispatcher = Depends(get_dispatcher),
) -> JSONResponse:
    """
    200 when the operation ran (a false verdict included), 400 when the
    payload is missing fields or names an unknown operation.
    """
    resp, status_code = await dispatcher.dispatch(req)
    return JSONResponse(status_code=status_code, content=resp.to_wire())


@router.options("/zkp", summary="CORS preflight", response_model=PreflightResponse)
async def preflight_zkp() -> JSONResponse:
    log.debug("CORS preflight request received")
    return JSONResponse(
        content=PreflightResponse().model_dump(),
        headers=DEFAULT_CORS.preflight_headers(),
    )


def get_router() -> APIRouter:
    return router
