"""
Uvicorn launcher for the Spartan ZKP service.

Usage:
  python -m spartan_zkp.main

Configuration comes from the environment only (see ``spartan_zkp.config``):
  HOST (default 0.0.0.0), PORT (default 8080), LOG_LEVEL, LOG_FORMAT
"""

from __future__ import annotations

import uvicorn

from .app import create_app
from .config import load_config
from .errors import AVAILABLE_ENDPOINTS
from .logging import get_logger, setup_logging


def main() -> None:
    cfg = load_config()
    setup_logging(level=cfg.log_level, log_format=cfg.log_format)
    log = get_logger(__name__)

    log.info("service_starting", host=cfg.host, port=cfg.port, endpoints=list(AVAILABLE_ENDPOINTS))

    app = create_app(cfg)
    uvicorn.run(
        app,
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower(),
        # Logging is already routed through structlog
        log_config=None,
    )


if __name__ == "__main__":
    main()
