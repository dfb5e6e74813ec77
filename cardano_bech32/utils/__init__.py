from __future__ import annotations

"""
cardano_bech32.utils
====================

Leaf-layer toolbox shared by the address and asset codecs:

- Bech32 codec (checksum, charset tables, encode/decode)
- Bit regrouping (`convertbits`) and 8↔5 / hex↔5 helpers
- Hashing helper (BLAKE2b-160) and hex formatting

Nothing here knows about Cardano; the CIP-0019/CIP-0014 rules live one layer up.
"""

from .bech32 import (
    CHARSET,
    bech32_decode,
    bech32_encode,
    bytes_to_words,
    convertbits,
    hex_to_words,
    words_to_bytes,
    words_to_hex,
)
from .hash import blake2b_160, from_hex, to_hex

__all__ = [
    # bech32
    "CHARSET",
    "bech32_encode", "bech32_decode",
    "convertbits", "bytes_to_words", "words_to_bytes",
    "hex_to_words", "words_to_hex",
    # hashing
    "blake2b_160",
    "to_hex", "from_hex",
]
