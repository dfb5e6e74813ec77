# SPDX-License-Identifier: Apache-2.0
"""
Native asset fingerprints (CIP-0014): published vectors plus input validation.
"""

from __future__ import annotations

import hashlib
from typing import Any, Dict

import pytest

from cardano_bech32 import asset as N
from cardano_bech32 import errors as E
from cardano_bech32.utils import bech32 as b32

from tests.unit import read_json_fixture

VECTORS = read_json_fixture("cip14_vectors.json")
POLICY = VECTORS[0]["policy_id"]


@pytest.mark.parametrize("vec", VECTORS, ids=[v["fingerprint"] for v in VECTORS])
def test_encode_published_vectors(vec: Dict[str, Any]):
    assert N.encode_native_asset(vec["policy_id"], vec["asset_name"]) == vec["fingerprint"]


@pytest.mark.parametrize("vec", VECTORS, ids=[v["fingerprint"] for v in VECTORS])
def test_decode_recovers_digest(vec: Dict[str, Any]):
    digest = N.decode_native_asset(vec["fingerprint"])
    assert digest == N.hash_native_asset(vec["policy_id"], vec["asset_name"])
    assert len(digest) == 40


def test_hash_is_over_raw_bytes():
    expected = hashlib.blake2b(
        bytes.fromhex(POLICY) + b"PATATE", digest_size=20
    ).hexdigest()
    assert N.hash_native_asset(POLICY, "504154415445") == expected


def test_asset_name_defaults_to_empty():
    assert N.encode_native_asset(POLICY) == VECTORS[0]["fingerprint"]


def test_fingerprint_record():
    fp = N.fingerprint(POLICY.upper(), "504154415445")
    assert fp.fingerprint == "asset13n25uv0yaf5kus35fm2k86cqy60z58d9xmde92"
    assert fp.digest == N.hash_native_asset(POLICY, "504154415445")
    assert fp.policy_id == POLICY
    assert fp.asset_name == "504154415445"
    assert fp.to_dict() == {
        "fingerprint": fp.fingerprint,
        "digest": fp.digest,
        "policyId": POLICY,
        "assetName": "504154415445",
    }


@pytest.mark.parametrize("policy", ["", "00" * 27, "00" * 29])
def test_policy_id_must_be_28_bytes(policy: str):
    with pytest.raises(E.InvalidPolicyId):
        N.encode_native_asset(policy)


def test_asset_name_limit():
    N.encode_native_asset(POLICY, "ff" * 32)
    with pytest.raises(E.InvalidAssetName):
        N.encode_native_asset(POLICY, "ff" * 33)


def test_malformed_hex_is_rejected():
    with pytest.raises(E.InvalidHex):
        N.encode_native_asset(POLICY, "50415")


def test_decode_rejects_other_hrp():
    with pytest.raises(E.NotAssetFingerprint):
        N.decode_native_asset("addr10pqtlnyq06v")


@pytest.mark.parametrize("size", [19, 21])
def test_decode_rejects_wrong_digest_length(size: int):
    fake = b32.bech32_encode("asset", b32.bytes_to_words(b"\x01" * size))
    with pytest.raises(E.InvalidFingerprintLength):
        N.decode_native_asset(fake)


def test_decode_surfaces_checksum_errors():
    good = VECTORS[0]["fingerprint"]
    bad = good[:-1] + ("q" if good[-1] != "q" else "p")
    with pytest.raises(E.InvalidChecksum):
        N.decode_native_asset(bad)
