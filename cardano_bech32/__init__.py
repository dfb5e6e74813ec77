"""
cardano_bech32
==============

Bech32 codec with a Cardano layer on top:

- **Bech32:** BIP-0173 checksum, charset tables, strict decoding, bit regrouping
- **Addresses:** CIP-0019 Shelley address header/payload decode & encode,
  stake-address derivation
- **Native assets:** CIP-0014 fingerprints (BLAKE2b-160 of policy id ‖ asset name)

Import the functions you need directly from here:

    from cardano_bech32 import decode_cardano_address, encode_native_asset

All failures raise a subclass of `cardano_bech32.errors.CardanoBech32Error`
(itself a `ValueError`).
"""

from __future__ import annotations

from .version import __version__
from . import errors
from .utils.bech32 import bech32_decode, bech32_encode, convertbits, decode, encode
from .address import (
    AddressRecord,
    AddressType,
    NetworkId,
    StakeAddressRecord,
    decode_cardano_address,
    decode_cardano_stake_address,
    encode_cardano_address,
    encode_cardano_stake_address,
    is_valid_cardano_address,
)
from .asset import (
    AssetFingerprint,
    decode_native_asset,
    encode_native_asset,
    fingerprint,
    hash_native_asset,
)
from .errors import CardanoBech32Error

__all__ = [
    "__version__",
    "errors",
    "CardanoBech32Error",
    # bech32
    "encode",
    "decode",
    "bech32_encode",
    "bech32_decode",
    "convertbits",
    # addresses
    "AddressType",
    "NetworkId",
    "AddressRecord",
    "StakeAddressRecord",
    "decode_cardano_address",
    "encode_cardano_address",
    "encode_cardano_stake_address",
    "decode_cardano_stake_address",
    "is_valid_cardano_address",
    # assets
    "AssetFingerprint",
    "hash_native_asset",
    "encode_native_asset",
    "decode_native_asset",
    "fingerprint",
]
