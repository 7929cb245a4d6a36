"""
Proof artifact codec.

A proof artifact travels as an opaque string inside ``OperationResponse.proof``
and comes back in ``OperationRequest.proof_data``. On the wire it is compact
JSON with sorted keys, e.g.::

    {"accounts_verified":3,"max_balance":100000,"pi_a":"0xaaaa…",
     "pi_b":"0xbbbb…","pi_c":"0xcccc…","protocol":"spartan-v1",
     "timestamp":"2024-05-01T12:00:00.000000+00:00"}

The three ``pi_*`` members are fixed placeholder patterns, not commitments.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from spartan_zkp.errors import MalformedProof
from spartan_zkp.models.zkp import ProofArtifact

PROTOCOL = "spartan-v1"

PI_A = "0x" + "a" * 64
PI_B = "0x" + "b" * 64
PI_C = "0x" + "c" * 64


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def _loads_strict(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def build_artifact(
    witness: Sequence[int],
    max_balance: int,
    *,
    now: Optional[datetime] = None,
) -> ProofArtifact:
    """Assemble the placeholder artifact for a witness; never fails."""
    ts = (now or datetime.now(timezone.utc)).isoformat()
    return ProofArtifact(
        pi_a=PI_A,
        pi_b=PI_B,
        pi_c=PI_C,
        protocol=PROTOCOL,
        accounts_verified=len(witness),
        max_balance=max_balance,
        timestamp=ts,
    )


def encode_artifact(artifact: ProofArtifact) -> str:
    return json.dumps(artifact.model_dump(), sort_keys=True, separators=(",", ":"))


def decode_artifact(text: str) -> ProofArtifact:
    """
    Parse a transport string back into a :class:`ProofArtifact`.

    Raises
    ------
    MalformedProof
        If ``text`` is not JSON, or is JSON of the wrong shape.
    """
    try:
        data = _loads_strict(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedProof("Proof is not valid JSON", details={"reason": str(e)}) from e
    if not isinstance(data, dict):
        raise MalformedProof("Proof must be a JSON object", details={"type": type(data).__name__})
    try:
        return ProofArtifact.model_validate(data)
    except ValidationError as e:
        raise MalformedProof("Proof does not match the artifact shape", details={"errors": e.errors()}) from e


def is_well_formed(text: str) -> bool:
    """True iff ``text`` is a syntactically valid JSON document (any value)."""
    # Nesting deeper than the interpreter stack counts as malformed
    try:
        _loads_strict(text)
    except (TypeError, ValueError, RecursionError):
        return False
    return True


__all__ = [
    "PROTOCOL",
    "PI_A",
    "PI_B",
    "PI_C",
    "build_artifact",
    "encode_artifact",
    "decode_artifact",
    "is_well_formed",
]
