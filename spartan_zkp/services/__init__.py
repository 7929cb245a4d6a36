"""
spartan_zkp.services
====================

Service layer behind ``POST /zkp``. Submodules are imported lazily.

Public submodules
-----------------
- artifact    : proof artifact codec (build / encode / decode / well-formedness).
- validate    : per-operation required-field checks.
- prover      : placeholder proof generator.
- verifier    : placeholder proof verifier.
- dispatcher  : routes a request to prover/verifier and shapes the response.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = ["artifact", "validate", "prover", "verifier", "dispatcher"]


def __getattr__(name: str):
    if name in __all__:
        return import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(list(globals().keys()) + __all__)


if TYPE_CHECKING:  # pragma: no cover
    from . import artifact as artifact
    from . import dispatcher as dispatcher
    from . import prover as prover
    from . import validate as validate
    from . import verifier as verifier
