from __future__ import annotations

"""
Bech32 encoder/decoder used by the Cardano address layer
========================================================

This module implements the BIP-0173 Bech32 primitives (checksum constant 1):

- 32-character alphabet and a 128-entry reverse lookup table
- BCH checksum (polymod), HRP expansion, checksum creation/verification
- String assembly (`bech32_encode`) and strict parsing (`bech32_decode`)
- Power-of-two regrouping (`convertbits`) and 8↔5 / hex↔5 helpers

Usage
-----
    s = bech32_encode("test", [15, 1, 0, 11, 31])    # "test10pqtlnsvkuk"
    hrp, words = bech32_decode(s)                    # ("test", [15, 1, 0, 11, 31])
    payload = words_to_bytes(words)                  # strict 5→8 regroup

Notes
-----
* Decoding reports the *first* violation found, in a fixed order: length,
  character range, case, separator, HRP length, checksum length, data
  characters, checksum.
* Bech32m (BIP-0350) is not supported; only the original constant is accepted.
* Bech32's 90-character limit is not enforced: Cardano addresses exceed it.

References
----------
BIP-0173: https://github.com/bitcoin/bips/blob/master/bip-0173.mediawiki
"""

from typing import Iterable, List, Sequence, Tuple

from cardano_bech32 import logging as clog
from cardano_bech32.errors import (
    ChecksumTooShort,
    EmptyHrp,
    HrpTooLong,
    InvalidCharacter,
    InvalidChecksum,
    InvalidHrpCharacters,
    InvalidPadding,
    InvalidValueForBitConversion,
    MissingSeparator,
    MixedCase,
    OutOfRangeCharacter,
    TooShort,
)
from cardano_bech32.utils.hash import from_hex

log = clog.get_logger(__name__)

# 32-character alphabet per BIP-0173.
CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

# ASCII byte -> 5-bit value, -1 for "not a charset character".
# Upper- and lower-case letters share a value.
CHARSET_REV: Tuple[int, ...] = (
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    15, -1, 10, 17, 21, 20, 26, 30, 7, 5, -1, -1, -1, -1, -1, -1,
    -1, 29, -1, 24, 13, 25, 9, 8, 23, -1, 18, 22, 31, 27, 19, -1,
    1, 0, 3, 16, 11, 28, 12, 14, 6, 4, 2, -1, -1, -1, -1, -1,
    -1, 29, -1, 24, 13, 25, 9, 8, 23, -1, 18, 22, 31, 27, 19, -1,
    1, 0, 3, 16, 11, 28, 12, 14, 6, 4, 2, -1, -1, -1, -1, -1,
)

# BCH generator coefficients
GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)

SEPARATOR = "1"
CHECKSUM_LENGTH = 6
MIN_LENGTH = 1 + 1 + CHECKSUM_LENGTH  # hrp + separator + checksum
MAX_HRP_LENGTH = 83

# Printable US-ASCII accepted in a Bech32 string (inclusive).
_MIN_CHAR = 0x21
_MAX_CHAR = 0x7E


# ---------------------------------------------------------------------------
# Core Bech32 primitives
# ---------------------------------------------------------------------------


def polymod(values: Iterable[int]) -> int:
    """Compute the 30-bit Bech32 checksum residue of `values`."""
    chk = 1
    for v in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ v
        for i in range(5):
            if (top >> i) & 1:
                chk ^= GENERATORS[i]
    return chk


def hrp_expand(hrp: str) -> List[int]:
    """Expand HRP for checksum computation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def create_checksum(hrp: str, words: Sequence[int]) -> List[int]:
    values = hrp_expand(hrp) + list(words)
    residue = polymod(values + [0] * CHECKSUM_LENGTH) ^ 1
    return [(residue >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def verify_checksum(hrp: str, words: Sequence[int]) -> bool:
    """`words` must include the trailing six checksum words."""
    return polymod(hrp_expand(hrp) + list(words)) == 1


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise EmptyHrp()
    if len(hrp) > MAX_HRP_LENGTH:
        raise HrpTooLong(length=len(hrp), limit=MAX_HRP_LENGTH)
    for pos, c in enumerate(hrp):
        if ord(c) < _MIN_CHAR or ord(c) > _MAX_CHAR:
            raise InvalidHrpCharacters(position=pos)
    if hrp.lower() != hrp and hrp.upper() != hrp:
        raise MixedCase()


def bech32_encode(hrp: str, words: Sequence[int]) -> str:
    """
    Encode HRP + 5-bit data words into a Bech32 string.

    The HRP may be given in either case but not mixed; output is always lowercase.
    """
    _check_hrp(hrp)
    for pos, w in enumerate(words):
        if w < 0 or w > 31:
            raise InvalidValueForBitConversion(
                "data words must be 5-bit (0..31)", position=pos, value=w
            )

    hrp = hrp.lower()
    combined = list(words) + create_checksum(hrp, words)
    return hrp + SEPARATOR + "".join(CHARSET[d] for d in combined)


def bech32_decode(bech: str) -> Tuple[str, List[int]]:
    """
    Decode a Bech32 string into (hrp, words) with the checksum stripped.
    Raises a Bech32Error subclass on failure.
    """
    length = len(bech)
    if length < MIN_LENGTH:
        raise TooShort(length=length, minimum=MIN_LENGTH)

    have_upper = False
    have_lower = False
    sep = -1
    chars: List[str] = []
    for pos, c in enumerate(bech):
        o = ord(c)
        if o < _MIN_CHAR or o > _MAX_CHAR:
            raise OutOfRangeCharacter(position=pos)
        if "a" <= c <= "z":
            have_lower = True
        elif "A" <= c <= "Z":
            have_upper = True
            c = c.lower()
        if c == SEPARATOR:
            sep = pos
        chars.append(c)

    if have_upper and have_lower:
        raise MixedCase()
    if sep == -1:
        raise MissingSeparator()
    if sep < 1:
        raise EmptyHrp()
    if sep > MAX_HRP_LENGTH:
        raise HrpTooLong(length=sep, limit=MAX_HRP_LENGTH)
    if sep + CHECKSUM_LENGTH + 1 > length:
        raise ChecksumTooShort(length=length - sep - 1)

    hrp = "".join(chars[:sep])
    data: List[int] = []
    for pos in range(sep + 1, length):
        o = ord(chars[pos])
        v = -1 if o & 0x80 else CHARSET_REV[o]
        if v == -1:
            raise InvalidCharacter(position=pos)
        data.append(v)

    if not verify_checksum(hrp, data):
        raise InvalidChecksum()

    log.debug("bech32 decoded", extra={"hrp": hrp, "words": len(data) - CHECKSUM_LENGTH})
    return hrp, data[:-CHECKSUM_LENGTH]


encode = bech32_encode
decode = bech32_decode


# ---------------------------------------------------------------------------
# Bit regrouping (BIP-0173 "convertbits")
# ---------------------------------------------------------------------------


def convertbits(
    data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True
) -> List[int]:
    """
    General power-of-2 base conversion.
    E.g. convertbits(bytes, 8, 5) to make Bech32 data words.

    If pad=False, leftover bits must be fewer than `from_bits` and zero.
    """
    acc = 0
    bits = 0
    ret: List[int] = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1

    for value in data:
        if value < 0 or (value >> from_bits):
            raise InvalidValueForBitConversion(value=value, bits=from_bits)
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)

    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        raise InvalidPadding(leftover_bits=bits)

    return ret


def bytes_to_words(data: bytes) -> List[int]:
    return convertbits(data, 8, 5, pad=True)


def words_to_bytes(words: Sequence[int]) -> bytes:
    return bytes(convertbits(words, 5, 8, pad=False))


def hex_to_words(hex_str: str) -> List[int]:
    """Hex text → raw bytes → zero-padded 5-bit words."""
    return bytes_to_words(from_hex(hex_str))


def words_to_hex(words: Sequence[int], pad: bool = False) -> str:
    """5-bit words → bytes rendered as two lowercase hex digits each."""
    return bytes(convertbits(words, 5, 8, pad=pad)).hex()


__all__ = [
    "CHARSET",
    "CHARSET_REV",
    "GENERATORS",
    "MAX_HRP_LENGTH",
    "polymod",
    "hrp_expand",
    "create_checksum",
    "verify_checksum",
    "bech32_encode",
    "bech32_decode",
    "encode",
    "decode",
    "convertbits",
    "bytes_to_words",
    "words_to_bytes",
    "hex_to_words",
    "words_to_hex",
]
