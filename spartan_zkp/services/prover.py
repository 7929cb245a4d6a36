"""
Placeholder proof generator.

There is no proving backend behind this: the artifact has a fixed shape
(see ``services.artifact``) and the "work" is an awaited delay, so concurrent
requests keep flowing while one is being "proved".
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Sequence

from spartan_zkp.logging import get_logger
from spartan_zkp.models.zkp import ProofArtifact
from spartan_zkp.services.artifact import build_artifact

log = get_logger(__name__)

DEFAULT_PROVE_DELAY_S = 0.1


@dataclass(frozen=True)
class ProofGenerator:
    delay_s: float = DEFAULT_PROVE_DELAY_S

    async def generate(self, witness: Sequence[int], max_balance: int) -> ProofArtifact:
        """
        Produce an artifact for ``witness``. Accepts any input, including an
        empty witness or a negative ``max_balance``.
        """
        log.info("proof_generate", accounts=len(witness), max_balance=max_balance)
        if self.delay_s > 0:
            await asyncio.sleep(self.delay_s)
        return build_artifact(witness, max_balance)


__all__ = ["DEFAULT_PROVE_DELAY_S", "ProofGenerator"]
