from __future__ import annotations

"""
Error hierarchy for the Spartan ZKP service.

Every error the service reports is recovered locally and rendered as the
service's JSON envelope (``{"success": false, "error": ...}``); none is fatal
to the process.

Usage
-----
    from spartan_zkp.errors import UnknownOperation

    raise UnknownOperation("transmute")

Design
------
- Every error has:
  - ``status_code`` (int): HTTP status
  - ``code`` (str): stable machine code (e.g., "missing_field")
  - ``message`` (str): human-readable cause, surfaced verbatim as ``error``
  - ``details`` (dict|None): optional structured diagnostics (logged only)
- ``to_envelope()`` returns the JSON body.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Sequence

# Fixed listing returned for any unmatched method+path.
AVAILABLE_ENDPOINTS = ("GET /", "GET /health", "POST /zkp", "OPTIONS /zkp")


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ApiError(Exception):
    message: str
    status_code: int = 400
    code: str = "bad_request"
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_envelope(self, *, timestamp: bool = False) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "error": self.message}
        if timestamp:
            body["timestamp"] = utcnow_iso()
        return body


# ------------------------------ Concrete types ------------------------------- #


class MissingField(ApiError):
    """A field required by the requested operation is absent."""

    # Per-operation messages are part of the wire contract.
    MESSAGES = {
        "prove": "Missing witness_data or max_balance",
        "verify": "Missing proof_data or public_inputs",
    }

    def __init__(self, operation: str, missing: Sequence[str]):
        self.operation = operation
        self.missing = tuple(missing)
        message = self.MESSAGES.get(operation) or f"Missing {' or '.join(self.missing)}"
        super().__init__(
            message=message,
            status_code=400,
            code="missing_field",
            details={"operation": operation, "missing": list(self.missing)},
        )


class UnknownOperation(ApiError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            message=f"Unknown operation: {operation}",
            status_code=400,
            code="unknown_operation",
            details={"operation": operation},
        )


class MalformedBody(ApiError):
    def __init__(self, message: str = "Malformed request body", *, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message=message, status_code=422, code="malformed_body", details=details)


class MalformedProof(ApiError):
    """Raised by the artifact codec when text is not a decodable proof artifact."""

    def __init__(self, message: str = "Malformed proof artifact", *, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message=message, status_code=400, code="malformed_proof", details=details)


class RouteNotFound(ApiError):
    def __init__(self, method: str = "", path: str = ""):
        super().__init__(
            message="Endpoint not found. Available endpoints: " + ", ".join(AVAILABLE_ENDPOINTS),
            status_code=404,
            code="not_found",
            details={"method": method, "path": path},
        )


class ServerError(ApiError):
    def __init__(self, message: str = "Internal server error", *, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message=message, status_code=500, code="server_error", details=details)


__all__ = [
    "AVAILABLE_ENDPOINTS",
    "ApiError",
    "MissingField",
    "UnknownOperation",
    "MalformedBody",
    "MalformedProof",
    "RouteNotFound",
    "ServerError",
    "utcnow_iso",
]
