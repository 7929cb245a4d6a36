"""
Spartan ZKP Service
===================

Thin FastAPI service exposing placeholder ``prove`` / ``verify`` operations
behind a single ``POST /zkp`` endpoint.

This package exposes:

- ``__version__``: semantic version string
- ``build_app()``: convenience creator for a configured FastAPI app

Prefer importing submodules directly for specific concerns:
``spartan_zkp.config``, ``spartan_zkp.logging``,
``spartan_zkp.services.dispatcher``, etc.
"""

from __future__ import annotations

from .version import __version__

__all__ = ["__version__", "build_app"]


def build_app():
    """
    Create and return a fully configured FastAPI application.

    Importing lazily avoids importing FastAPI when consumers only need
    version metadata.
    """
    from .app import create_app

    return create_app()
