from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .config import Settings, load_config
from .middleware.errors import install_error_handlers
from .middleware.logging import install_access_log_middleware
from .middleware.request_id import RequestIdMiddleware
from .routers import build_router
from .security.cors import setup_cors
from .services.dispatcher import OperationDispatcher
from .version import __version__


def create_app(
    config: Optional[Settings] = None,
    *,
    dispatcher: Optional[OperationDispatcher] = None,
) -> FastAPI:
    """
    FastAPI factory. Mounts routers, middleware and error handlers.

    ``dispatcher`` overrides the one built from ``config`` (tests inject a
    zero-delay instance this way).
    """
    cfg = config or load_config()

    app = FastAPI(
        title="Spartan ZKP Service",
        version=__version__,
        # The HTTP surface is exactly GET /, GET /health, POST /zkp, OPTIONS /zkp
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # "/health/" is a different path, answered with the 404 envelope
        redirect_slashes=False,
    )
    app.state.config = cfg
    app.state.dispatcher = dispatcher or OperationDispatcher.from_settings(cfg)

    # Middleware added last runs first: request id → access log → CORS → routes
    setup_cors(app)
    install_access_log_middleware(app)
    app.add_middleware(RequestIdMiddleware)

    install_error_handlers(app)

    app.include_router(build_router())
    return app
