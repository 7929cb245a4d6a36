from __future__ import annotations

"""
Operation models

- OperationRequest: body of ``POST /zkp``; carries an operation name and the
  operation-specific optional fields.
- OperationResponse: envelope returned for every ``POST /zkp`` call.
- ProofArtifact: the (placeholder) proof object; transported as an opaque
  JSON string inside ``OperationResponse.proof``.

Notes
-----
* ``operation`` is a plain string at the boundary; unknown values are
  rejected by the dispatcher, not by parsing.
* Body typing is strict: ``"5"`` is not an integer and ``true`` is not one
  either. Unknown extra keys are ignored.
* ``public_inputs`` is accepted and never consulted.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Operation(str, Enum):
    prove = "prove"
    verify = "verify"


class OperationRequest(BaseModel):
    """
    Request to run one operation.

    Fields
    ------
    operation: str
        "prove", "verify", or anything else (rejected as unknown).
    witness_data: Optional[List[int]]
        Private witness entries (prove only). An empty list is valid.
    max_balance: Optional[int]
        Declared upper bound associated with the witness (prove only).
    proof_data: Optional[str]
        Serialized proof artifact (verify only).
    public_inputs: Optional[List[str]]
        Public inputs (verify only); ignored by verification.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    operation: str = Field(..., description="Operation name: prove | verify.")
    witness_data: Optional[List[int]] = Field(default=None, description="Witness entries (prove).")
    max_balance: Optional[int] = Field(default=None, description="Declared max balance (prove).")
    proof_data: Optional[str] = Field(default=None, description="Serialized proof artifact (verify).")
    public_inputs: Optional[List[str]] = Field(default=None, description="Public inputs (verify; unused).")


class OperationResponse(BaseModel):
    """
    Response envelope. Absent fields are omitted on the wire.
    """

    model_config = ConfigDict(extra="forbid")

    success: bool = Field(..., description="Outcome of the whole request.")
    proof: Optional[str] = Field(default=None, description="Serialized proof (successful prove).")
    public_signals: Optional[List[str]] = Field(default=None, description="Public signals (successful prove).")
    verification_result: Optional[bool] = Field(default=None, description="Verdict (successful verify).")
    error: Optional[str] = Field(default=None, description="Human-readable cause (failure).")
    processing_time_ms: Optional[int] = Field(
        default=None, ge=0, description="Elapsed generate/verify time in ms (success)."
    )

    @model_validator(mode="after")
    def _roles_exclusive(self) -> "OperationResponse":
        proved = self.proof is not None or self.public_signals is not None
        verified = self.verification_result is not None
        if proved and verified:
            raise ValueError("A response carries either a proof or a verification result, not both.")
        if self.error is not None and (proved or verified or self.processing_time_ms is not None):
            raise ValueError("`error` excludes the success-only fields.")
        return self

    @classmethod
    def failure(cls, error: str) -> "OperationResponse":
        return cls(success=False, error=error)

    def to_wire(self) -> dict:
        return self.model_dump(exclude_none=True)


class ProofArtifact(BaseModel):
    """
    Placeholder proof object. Built once per prove call and never mutated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pi_a: str
    pi_b: str
    pi_c: str
    protocol: str
    accounts_verified: int = Field(..., ge=0)
    max_balance: int
    timestamp: str = Field(..., description="RFC 3339 generation time (UTC).")


__all__ = ["Operation", "OperationRequest", "OperationResponse", "ProofArtifact"]
