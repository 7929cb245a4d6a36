"""
Routers package: aggregates the service's HTTP routes into a single APIRouter.

Usage (from app factory):
    from spartan_zkp.routers import build_router
    app.include_router(build_router())
"""

from __future__ import annotations

import importlib
import logging
from typing import List, Sequence, Tuple

from fastapi import APIRouter

log = logging.getLogger(__name__)

# Order controls route declaration order.
ROUTER_MODULES: Tuple[str, ...] = (
    "spartan_zkp.routers.health",
    "spartan_zkp.routers.zkp",
)


def _load_router(module_path: str) -> APIRouter:
    """
    Import a module and return its APIRouter (``router`` or ``get_router()``).
    """
    mod = importlib.import_module(module_path)
    router = getattr(mod, "router", None)
    if isinstance(router, APIRouter):
        return router
    get_router = getattr(mod, "get_router", None)
    if callable(get_router):
        r = get_router()
        if isinstance(r, APIRouter):
            return r
    raise RuntimeError(f"module {module_path} has no APIRouter export")


def collect_routers(candidates: Sequence[str] = ROUTER_MODULES) -> List[APIRouter]:
    routers: List[APIRouter] = []
    for mod in candidates:
        routers.append(_load_router(mod))
        log.debug("mounted router from %s", mod)
    return routers


def build_router() -> APIRouter:
    root = APIRouter(redirect_slashes=False)
    for r in collect_routers():
        root.include_router(r)
    return root


__all__ = ["ROUTER_MODULES", "build_router", "collect_routers"]
