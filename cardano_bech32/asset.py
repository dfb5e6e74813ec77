from __future__ import annotations

"""
asset.py — native asset fingerprints (CIP-0014)

Format
------
fingerprint = bech32( HRP="asset", data = convertbits(blake2b_160(policy_id || asset_name), 8->5) )

- `policy_id` is the 28-byte minting policy hash.
- `asset_name` is 0..32 raw bytes (often, but not necessarily, UTF-8 text).
- Both are supplied as hex and hashed as raw bytes, never as hex text.

Examples
--------
>>> encode_native_asset("7eae28af2208be856f7a119668ae52a49b73725e326dc16579dcc373")
'asset1rjklcrnsdzqp65wjgrg55sy9723kw09mlgvlc3'
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from cardano_bech32 import logging as clog
from cardano_bech32.errors import (
    InvalidAssetName,
    InvalidFingerprintLength,
    InvalidPolicyId,
    NotAssetFingerprint,
)
from cardano_bech32.utils import bech32 as _b32
from cardano_bech32.utils.hash import BLAKE2B_160_SIZE, blake2b_160, from_hex, to_hex

log = clog.get_logger(__name__)

ASSET_HRP = "asset"
POLICY_ID_SIZE = 28
MAX_ASSET_NAME_SIZE = 32


@dataclass(frozen=True)
class AssetFingerprint:
    fingerprint: str
    digest: str  # hex, 20 bytes
    policy_id: Optional[str] = None  # hex; None when parsed from a fingerprint
    asset_name: Optional[str] = None  # hex

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fingerprint": self.fingerprint,
            "digest": self.digest,
            "policyId": self.policy_id,
            "assetName": self.asset_name,
        }


def _asset_bytes(policy_id: str, asset_name: str) -> bytes:
    policy = from_hex(policy_id)
    if len(policy) != POLICY_ID_SIZE:
        raise InvalidPolicyId(length=len(policy), expected=POLICY_ID_SIZE)
    name = from_hex(asset_name) if asset_name else b""
    if len(name) > MAX_ASSET_NAME_SIZE:
        raise InvalidAssetName(length=len(name), limit=MAX_ASSET_NAME_SIZE)
    return policy + name


def hash_native_asset(policy_id: str, asset_name: str = "") -> str:
    """
    BLAKE2b-160 of the raw policy id bytes followed by the raw asset name
    bytes, as 40 lower-case hex characters.
    """
    return to_hex(blake2b_160(_asset_bytes(policy_id, asset_name)))


def encode_native_asset(policy_id: str, asset_name: str = "") -> str:
    """Compute the `asset1…` fingerprint of a native asset."""
    digest = hash_native_asset(policy_id, asset_name)
    return _b32.bech32_encode(ASSET_HRP, _b32.hex_to_words(digest))


def decode_native_asset(asset_fingerprint: str) -> str:
    """
    Recover the 20-byte digest (hex) carried by an `asset1…` fingerprint.
    The digest is one-way; policy id and asset name cannot be recovered.
    """
    hrp, words = _b32.bech32_decode(asset_fingerprint)
    if hrp != ASSET_HRP:
        raise NotAssetFingerprint(hrp=hrp)
    digest = _b32.words_to_bytes(words)
    if len(digest) != BLAKE2B_160_SIZE:
        raise InvalidFingerprintLength(length=len(digest), expected=BLAKE2B_160_SIZE)
    log.debug("asset fingerprint decoded", extra={"digest": digest})
    return to_hex(digest)


def fingerprint(policy_id: str, asset_name: str = "") -> AssetFingerprint:
    """Convenience wrapper returning the fingerprint together with its inputs."""
    digest = hash_native_asset(policy_id, asset_name)
    return AssetFingerprint(
        fingerprint=_b32.bech32_encode(ASSET_HRP, _b32.hex_to_words(digest)),
        digest=digest,
        policy_id=to_hex(from_hex(policy_id)),
        asset_name=to_hex(from_hex(asset_name)) if asset_name else "",
    )


__all__ = [
    "ASSET_HRP",
    "AssetFingerprint",
    "hash_native_asset",
    "encode_native_asset",
    "decode_native_asset",
    "fingerprint",
]
