from __future__ import annotations

import pytest

from .conftest import assert_cors

# POST /zkp {"operation": "verify", ...}
#
# The placeholder verifier accepts any well-formed JSON document; a false
# verdict is still a successful operation (HTTP 200).


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "proof_data",
    [
        '{"pi_a": "0x00", "protocol": "anything"}',
        "{}",
        "[1, 2, 3]",
        "42",
        '"just a string"',
        "null",
        "  {\"padded\": true}\n",
    ],
)
async def test_verify_well_formed_is_valid(aclient, proof_data):
    resp = await aclient.post(
        "/zkp", json={"operation": "verify", "proof_data": proof_data, "public_inputs": ["1"]}
    )
    assert resp.status_code == 200, resp.text
    assert_cors(resp)
    data = resp.json()
    assert data["success"] is True
    assert data["verification_result"] is True
    assert data["processing_time_ms"] >= 0
    assert "proof" not in data and "public_signals" not in data


@pytest.mark.asyncio
@pytest.mark.parametrize("proof_data", ["not-json", "", "{", "{'single': 'quotes'}", "NaN", "[Infinity]"])
async def test_verify_malformed_is_invalid_but_successful(aclient, proof_data):
    resp = await aclient.post(
        "/zkp", json={"operation": "verify", "proof_data": proof_data, "public_inputs": []}
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["success"] is True
    assert data["verification_result"] is False
    assert "error" not in data


@pytest.mark.asyncio
@pytest.mark.parametrize("public_inputs", [[], ["1"], ["0", "garbage", ""]])
async def test_verify_ignores_public_inputs(aclient, public_inputs):
    resp = await aclient.post(
        "/zkp", json={"operation": "verify", "proof_data": "{}", "public_inputs": public_inputs}
    )
    assert resp.status_code == 200
    assert resp.json()["verification_result"] is True


@pytest.mark.asyncio
async def test_verify_missing_public_inputs(aclient):
    resp = await aclient.post("/zkp", json={"operation": "verify", "proof_data": "{}"})
    assert resp.status_code == 400
    assert_cors(resp)
    assert resp.json() == {"success": False, "error": "Missing proof_data or public_inputs"}


@pytest.mark.asyncio
async def test_verify_missing_proof_data(aclient):
    resp = await aclient.post("/zkp", json={"operation": "verify", "public_inputs": ["1"]})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing proof_data or public_inputs"


@pytest.mark.asyncio
async def test_prove_then_verify_roundtrip(aclient, prove_body):
    proved = await aclient.post("/zkp", json=prove_body)
    assert proved.status_code == 200
    data = proved.json()

    verified = await aclient.post(
        "/zkp",
        json={"operation": "verify", "proof_data": data["proof"], "public_inputs": data["public_signals"]},
    )
    assert verified.status_code == 200
    assert verified.json()["verification_result"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize("proof_data", ["[" * 200000, "[" * 200000 + "]" * 200000])
async def test_verify_deeply_nested_proof_is_invalid(aclient, proof_data):
    resp = await aclient.post(
        "/zkp", json={"operation": "verify", "proof_data": proof_data, "public_inputs": []}
    )
    assert resp.status_code == 200, resp.text
    assert_cors(resp)
    data = resp.json()
    assert data["success"] is True
    assert data["verification_result"] is False
