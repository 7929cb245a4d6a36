from __future__ import annotations

"""
Public model surface for the Spartan ZKP service.

Symbols are lazily re-exported from submodules via __getattr__ (PEP 562).

Submodules:
- zkp.py      → Operation, OperationRequest, OperationResponse, ProofArtifact
- health.py   → HealthResponse, PreflightResponse, ErrorResponse
"""

from importlib import import_module
from typing import TYPE_CHECKING, Any, Dict, Tuple

__all__ = [
    # zkp
    "Operation",
    "OperationRequest",
    "OperationResponse",
    "ProofArtifact",
    # health
    "HealthResponse",
    "PreflightResponse",
    "ErrorResponse",
]

# name -> (module, attribute)
_EXPORTS: Dict[str, Tuple[str, str]] = {
    "Operation": ("spartan_zkp.models.zkp", "Operation"),
    "OperationRequest": ("spartan_zkp.models.zkp", "OperationRequest"),
    "OperationResponse": ("spartan_zkp.models.zkp", "OperationResponse"),
    "ProofArtifact": ("spartan_zkp.models.zkp", "ProofArtifact"),
    "HealthResponse": ("spartan_zkp.models.health", "HealthResponse"),
    "PreflightResponse": ("spartan_zkp.models.health", "PreflightResponse"),
    "ErrorResponse": ("spartan_zkp.models.health", "ErrorResponse"),
}


def __getattr__(name: str) -> Any:
    try:
        mod_name, attr = _EXPORTS[name]
    except KeyError as e:  # pragma: no cover - standard attribute error path
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from e
    return getattr(import_module(mod_name), attr)


def __dir__() -> list[str]:  # pragma: no cover
    return sorted(list(globals().keys()) + __all__)


if TYPE_CHECKING:
    from .health import ErrorResponse, HealthResponse, PreflightResponse
    from .zkp import (Operation, OperationRequest, OperationResponse,
                      ProofArtifact)
