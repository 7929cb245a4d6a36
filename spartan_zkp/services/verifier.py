"""
Placeholder proof verifier: a proof "verifies" when it is well-formed JSON.

``public_inputs`` is accepted for interface compatibility and ignored.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Sequence

from spartan_zkp.logging import get_logger
from spartan_zkp.services.artifact import is_well_formed

log = get_logger(__name__)

DEFAULT_VERIFY_DELAY_S = 0.05


@dataclass(frozen=True)
class ProofVerifier:
    delay_s: float = DEFAULT_VERIFY_DELAY_S

    async def verify(self, proof: str, public_inputs: Sequence[str]) -> bool:
        log.info("proof_verify", proof_len=len(proof), public_inputs=len(public_inputs))
        if self.delay_s > 0:
            await asyncio.sleep(self.delay_s)
        return is_well_formed(proof)


__all__ = ["DEFAULT_VERIFY_DELAY_S", "ProofVerifier"]
