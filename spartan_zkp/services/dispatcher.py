"""
Operation dispatcher: the core of ``POST /zkp``.

    dispatch(request) -> (OperationResponse, http_status)

1) Validate the payload for the requested operation (``services.validate``).
2) Route to the generator (prove) or the verifier (verify).
3) Wrap the result and the elapsed time of step 2 into a response envelope.

Status codes:
  - 200 for every completed operation, including a verify whose verdict is
    ``False`` (the operation succeeded; the proof did not).
  - 400 for missing fields or an unknown operation; no timing is reported.

The dispatcher holds no mutable state and is shared across all requests.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Tuple, cast

from fastapi import status

from spartan_zkp.config import Settings
from spartan_zkp.logging import get_logger
from spartan_zkp.models.zkp import Operation, OperationRequest, OperationResponse
from spartan_zkp.services.artifact import encode_artifact
from spartan_zkp.services.prover import ProofGenerator
from spartan_zkp.services.validate import validate
from spartan_zkp.services.verifier import ProofVerifier

log = get_logger(__name__)

# The placeholder prover always reports a single satisfied signal.
PUBLIC_SIGNALS = ("1",)


def _elapsed_ms(start: float) -> int:
    return max(0, int((time.perf_counter() - start) * 1000))


@dataclass(frozen=True)
class OperationDispatcher:
    generator: ProofGenerator = field(default_factory=ProofGenerator)
    verifier: ProofVerifier = field(default_factory=ProofVerifier)

    @classmethod
    def from_settings(cls, cfg: Settings) -> "OperationDispatcher":
        return cls(
            generator=ProofGenerator(delay_s=cfg.prove_delay_s),
            verifier=ProofVerifier(delay_s=cfg.verify_delay_s),
        )

    async def dispatch(self, request: OperationRequest) -> Tuple[OperationResponse, int]:
        log.info("operation_received", operation=request.operation)

        decision = validate(request)
        err = decision.error
        if err is not None:
            log.warning("operation_rejected", operation=request.operation, code=err.code, reason=err.message)
            return OperationResponse.failure(err.message), err.status_code

        if decision.operation is Operation.prove:
            return await self._prove(request)
        return await self._verify(request)

    async def _prove(self, request: OperationRequest) -> Tuple[OperationResponse, int]:
        witness = cast(List[int], request.witness_data)
        max_balance = cast(int, request.max_balance)
        start = time.perf_counter()
        artifact = await self.generator.generate(witness, max_balance)
        elapsed = _elapsed_ms(start)
        resp = OperationResponse(
            success=True,
            proof=encode_artifact(artifact),
            public_signals=list(PUBLIC_SIGNALS),
            processing_time_ms=elapsed,
        )
        log.info("operation_completed", operation="prove", processing_time_ms=elapsed)
        return resp, status.HTTP_200_OK

    async def _verify(self, request: OperationRequest) -> Tuple[OperationResponse, int]:
        proof = cast(str, request.proof_data)
        public_inputs = cast(List[str], request.public_inputs)
        start = time.perf_counter()
        ok = await self.verifier.verify(proof, public_inputs)
        elapsed = _elapsed_ms(start)
        resp = OperationResponse(
            success=True,
            verification_result=ok,
            processing_time_ms=elapsed,
        )
        log.info("operation_completed", operation="verify", verification_result=ok, processing_time_ms=elapsed)
        return resp, status.HTTP_200_OK


__all__ = ["PUBLIC_SIGNALS", "OperationDispatcher"]
