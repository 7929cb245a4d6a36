"""
Witness validator: decides whether a request carries every field its
operation needs. Presence is all that is checked; an empty witness list is
present. No side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from spartan_zkp.errors import ApiError, MissingField, UnknownOperation
from spartan_zkp.models.zkp import Operation, OperationRequest

REQUIRED_FIELDS: Dict[Operation, Tuple[str, ...]] = {
    Operation.prove: ("witness_data", "max_balance"),
    Operation.verify: ("proof_data", "public_inputs"),
}


@dataclass(frozen=True)
class Decision:
    proceed: bool
    operation: Optional[Operation] = None
    error: Optional[ApiError] = None

    @property
    def reason(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


def parse_operation(name: str) -> Optional[Operation]:
    try:
        return Operation(name)
    except ValueError:
        return None


def validate(request: OperationRequest) -> Decision:
    op = parse_operation(request.operation)
    if op is None:
        return Decision(proceed=False, error=UnknownOperation(request.operation))

    missing = tuple(f for f in REQUIRED_FIELDS[op] if getattr(request, f) is None)
    if missing:
        return Decision(proceed=False, operation=op, error=MissingField(op.value, missing))
    return Decision(proceed=True, operation=op)


__all__ = ["REQUIRED_FIELDS", "Decision", "parse_operation", "validate"]
