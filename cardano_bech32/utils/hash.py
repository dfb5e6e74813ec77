from __future__ import annotations

"""
cardano_bech32 utils — hashing helpers
======================================

Thin wrappers around the hash primitive and hex formatting used at the edges
of the codec:

- BLAKE2b-160 (stdlib `hashlib`), the digest CIP-0014 asset fingerprints use
- Hex helpers (`to_hex`, `from_hex`) with 0x-prefix handling

Notes
-----
* Hex output is always two lower-case digits per byte, zero padded, because
  hashes and address fields are exchanged as hex.
* `from_hex` is strict about length: an odd number of digits is an error
  rather than being silently left-padded.
"""

import binascii
import hashlib

from cardano_bech32.errors import InvalidHex

BLAKE2B_160_SIZE = 20

# ---------------------------------------------------------------------------
# Hex helpers
# ---------------------------------------------------------------------------


def to_hex(b: bytes, prefix: str = "") -> str:
    """
    Convert bytes to lower-case hex string with optional prefix (default none).
    """
    if not isinstance(b, (bytes, bytearray, memoryview)):
        raise TypeError("to_hex expects bytes-like input")
    return (prefix or "") + binascii.hexlify(bytes(b)).decode("ascii")


def from_hex(s: str | bytes | bytearray | memoryview) -> bytes:
    """
    Parse hex into bytes. Accepts strings with/without 0x prefix and ignores
    leading/trailing whitespace.
    """
    if isinstance(s, (bytes, bytearray, memoryview)):
        s = bytes(s).decode("ascii")
    if not isinstance(s, str):
        raise TypeError("from_hex expects str or bytes-like input")

    s = s.strip().lower()
    if s.startswith("0x"):
        s = s[2:]
    if len(s) % 2:
        raise InvalidHex("odd-length hex string", length=len(s))
    try:
        return binascii.unhexlify(s)
    except binascii.Error as e:
        raise InvalidHex(f"invalid hex string: {e}") from e


# ---------------------------------------------------------------------------
# BLAKE2b (always available via hashlib)
# ---------------------------------------------------------------------------


def blake2b_160(data: bytes | bytearray | memoryview) -> bytes:
    """
    BLAKE2b digest of `data` truncated by parameter to 20 bytes.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("blake2b_160 expects bytes-like input")
    return hashlib.blake2b(data, digest_size=BLAKE2B_160_SIZE).digest()
