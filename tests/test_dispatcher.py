from __future__ import annotations

import asyncio
import json
import time

import pytest

from spartan_zkp.config import Settings
from spartan_zkp.models.zkp import OperationRequest, OperationResponse
from spartan_zkp.services.dispatcher import OperationDispatcher
from spartan_zkp.services.prover import ProofGenerator
from spartan_zkp.services.validate import validate
from spartan_zkp.services.verifier import ProofVerifier

# The dispatcher is exercised directly here (no HTTP), including timing and
# concurrency behavior of the artificial delays.


def _req(**kw) -> OperationRequest:
    return OperationRequest(**kw)


# ---------------------------
# Validator
# ---------------------------


def test_validate_prove_requires_both_fields():
    assert validate(_req(operation="prove", witness_data=[], max_balance=0)).proceed
    d = validate(_req(operation="prove", witness_data=[1]))
    assert not d.proceed
    assert d.reason == "Missing witness_data or max_balance"
    assert d.error is not None and d.error.missing == ("max_balance",)


def test_validate_verify_requires_both_fields():
    assert validate(_req(operation="verify", proof_data="", public_inputs=[])).proceed
    d = validate(_req(operation="verify"))
    assert not d.proceed
    assert d.reason == "Missing proof_data or public_inputs"
    assert d.error is not None and d.error.missing == ("proof_data", "public_inputs")


@pytest.mark.parametrize(
    "kw",
    [
        {"operation": "prove", "witness_data": [1], "max_balance": 1},
        {"operation": "prove"},
        {"operation": "verify", "proof_data": "{}", "public_inputs": []},
        {"operation": "verify", "public_inputs": []},
        {"operation": "other"},
    ],
)
def test_decision_error_present_iff_rejected(kw):
    d = validate(_req(**kw))
    assert d.proceed is (d.error is None)


def test_validate_unknown_operation():
    d = validate(_req(operation="transmute", witness_data=[1], max_balance=1))
    assert not d.proceed
    assert d.operation is None
    assert d.reason == "Unknown operation: transmute"
    assert d.error is not None and d.error.status_code == 400


# ---------------------------
# Dispatch outcomes
# ---------------------------


@pytest.mark.asyncio
async def test_dispatch_prove(dispatcher):
    resp, status = await dispatcher.dispatch(_req(operation="prove", witness_data=[5, 6], max_balance=9))
    assert status == 200
    assert resp.success is True
    assert resp.public_signals == ["1"]
    assert resp.verification_result is None
    assert resp.error is None
    assert json.loads(resp.proof)["accounts_verified"] == 2


@pytest.mark.asyncio
async def test_dispatch_verify_false_verdict_is_ok(dispatcher):
    resp, status = await dispatcher.dispatch(_req(operation="verify", proof_data="not-json", public_inputs=[]))
    assert status == 200
    assert resp.success is True
    assert resp.verification_result is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kw, message",
    [
        ({"operation": "prove", "witness_data": [1]}, "Missing witness_data or max_balance"),
        ({"operation": "verify", "proof_data": "{}"}, "Missing proof_data or public_inputs"),
        ({"operation": "transmute"}, "Unknown operation: transmute"),
        ({"operation": ""}, "Unknown operation: "),
    ],
)
async def test_dispatch_rejections(dispatcher, kw, message):
    resp, status = await dispatcher.dispatch(_req(**kw))
    assert status == 400
    assert resp.success is False
    assert resp.error == message
    assert resp.processing_time_ms is None
    assert resp.to_wire() == {"success": False, "error": message}


# ---------------------------
# Timing & concurrency
# ---------------------------


@pytest.mark.asyncio
async def test_processing_time_covers_generation_delay():
    d = OperationDispatcher(generator=ProofGenerator(delay_s=0.05), verifier=ProofVerifier(delay_s=0.02))
    resp, _ = await d.dispatch(_req(operation="prove", witness_data=[1], max_balance=1))
    assert resp.processing_time_ms is not None and resp.processing_time_ms >= 40

    resp, _ = await d.dispatch(_req(operation="verify", proof_data="{}", public_inputs=[]))
    assert resp.processing_time_ms is not None and resp.processing_time_ms >= 15


@pytest.mark.asyncio
async def test_delays_do_not_block_concurrent_requests():
    d = OperationDispatcher(generator=ProofGenerator(delay_s=0.2), verifier=ProofVerifier(delay_s=0.2))
    reqs = [_req(operation="prove", witness_data=[i], max_balance=i) for i in range(5)]
    reqs += [_req(operation="verify", proof_data="{}", public_inputs=[]) for _ in range(5)]

    start = time.perf_counter()
    results = await asyncio.gather(*(d.dispatch(r) for r in reqs))
    elapsed = time.perf_counter() - start

    assert all(status == 200 for _, status in results)
    # Ten sequential waits would take 2s
    assert elapsed < 1.0


def test_from_settings_uses_configured_delays():
    cfg = Settings(prove_delay_ms=250, verify_delay_ms=5, _env_file=None)  # type: ignore[call-arg]
    d = OperationDispatcher.from_settings(cfg)
    assert d.generator.delay_s == pytest.approx(0.25)
    assert d.verifier.delay_s == pytest.approx(0.005)


def test_default_delays():
    d = OperationDispatcher()
    assert d.generator.delay_s == pytest.approx(0.1)
    assert d.verifier.delay_s == pytest.approx(0.05)


# ---------------------------
# Response envelope
# ---------------------------


@pytest.mark.asyncio
async def test_response_wire_roundtrip(dispatcher):
    samples = [
        (await dispatcher.dispatch(_req(operation="prove", witness_data=[1, 2], max_balance=3)))[0],
        (await dispatcher.dispatch(_req(operation="verify", proof_data="{}", public_inputs=["1"])))[0],
        (await dispatcher.dispatch(_req(operation="nope")))[0],
    ]
    for resp in samples:
        again = OperationResponse.model_validate_json(json.dumps(resp.to_wire()))
        assert again == resp


def test_response_rejects_mixed_roles():
    with pytest.raises(ValueError):
        OperationResponse(success=True, proof="{}", verification_result=True)
    with pytest.raises(ValueError):
        OperationResponse(success=False, error="x", processing_time_ms=3)
