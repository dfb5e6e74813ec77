from __future__ import annotations

"""
address.py — Cardano Shelley addresses (CIP-0019)

Format
------
Address = bech32( HRP="addr" | "addr_test", data = convertbits(header || payload, 8->5) )

header (1 byte):

     7 6 5 4 3 2 1 0
    ┌─┬─┬─┬─┬─┬─┬─┬─┐
    │t│t│t│t│n│n│n│n│     t = address type (0..7), n = network id (0 testnet, 1 mainnet)
    └─┴─┴─┴─┴─┴─┴─┴─┘

payload by address type:

    0: PaymentKeyHash + StakeKeyHash        4: PaymentKeyHash + Pointer (deprecated)
    1: ScriptHash     + StakeKeyHash        5: ScriptHash     + Pointer (deprecated)
    2: PaymentKeyHash + ScriptHash          6: PaymentKeyHash (enterprise)
    3: ScriptHash     + ScriptHash          7: ScriptHash     (enterprise)

Hashes are 28 bytes. Pointer bytes (types 4/5) are carried through as an
opaque hex "stake hash" and never parsed.

Stake addresses reuse the staking hash under HRP "stake" | "stake_test" with a
header whose high nibble is 0b1110 (address types 0/1) or 0b1111 (types 2/3).
Types 4..7 have no stake form: derivation returns None rather than failing.

Examples
--------
>>> rec = decode_cardano_address("addr1vyntqn4yflcsjj2akudmxwjq0anmk99ut9zmghk7qe99jpcg69wvw")
>>> rec.address_type, rec.network_id, rec.stake_address
(6, 1, None)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from cardano_bech32 import logging as clog
from cardano_bech32.errors import (
    CardanoBech32Error,
    HrpNetworkMismatch,
    InvalidHashLength,
    MissingStakeHash,
    NotCardanoAddress,
    NotStakeAddress,
    UnknownAddressType,
    UnknownNetworkId,
)
from cardano_bech32.utils import bech32 as _b32
from cardano_bech32.utils.hash import from_hex, to_hex

log = clog.get_logger(__name__)

HASH_SIZE = 28

ADDRESS_PREFIX = "addr"
HRP_MAINNET = "addr"
HRP_TESTNET = "addr_test"
STAKE_HRP_MAINNET = "stake"
STAKE_HRP_TESTNET = "stake_test"


class AddressType(IntEnum):
    BASE_KEY_KEY = 0
    BASE_SCRIPT_KEY = 1
    BASE_KEY_SCRIPT = 2
    BASE_SCRIPT_SCRIPT = 3
    POINTER_KEY = 4
    POINTER_SCRIPT = 5
    ENTERPRISE_KEY = 6
    ENTERPRISE_SCRIPT = 7


class NetworkId(IntEnum):
    TESTNET = 0
    MAINNET = 1


# ---------------------------------------------------------------------------
# Header tables
# ---------------------------------------------------------------------------

ADDRESS_TYPE_BITS: Dict[int, int] = {
    0: 0b0000,
    1: 0b0001,
    2: 0b0010,
    3: 0b0011,
    4: 0b0100,
    5: 0b0101,
    6: 0b0110,
    7: 0b0111,
}

NETWORK_ID_BITS: Dict[int, int] = {
    0: 0b0000,
    1: 0b0001,
}

STAKE_KEY_PREFIX = 0b1110
STAKE_SCRIPT_PREFIX = 0b1111

# Address types without an entry have no stake-address form.
STAKE_PREFIX_BITS: Dict[int, int] = {
    0: STAKE_KEY_PREFIX,
    1: STAKE_KEY_PREFIX,
    2: STAKE_SCRIPT_PREFIX,
    3: STAKE_SCRIPT_PREFIX,
}


def address_type_bits(address_type: int) -> int:
    try:
        return ADDRESS_TYPE_BITS[address_type]
    except KeyError:
        raise UnknownAddressType(
            f"Unknown address type {address_type}", address_type=address_type
        ) from None


def network_id_bits(network_id: int) -> int:
    try:
        return NETWORK_ID_BITS[network_id]
    except KeyError:
        raise UnknownNetworkId(
            f"Unknown network id {network_id}", network_id=network_id
        ) from None


def encode_address_header(address_type: int, network_id: int) -> int:
    """Pack type and network into the CIP-0019 header byte."""
    return (address_type_bits(address_type) << 4) | network_id_bits(network_id)


def decode_address_header(header: int) -> Tuple[int, int]:
    """Split a header byte into (address_type, network_id) without validating either."""
    return (header >> 4) & 0x0F, header & 0x0F


def address_hrp(network_id: int) -> str:
    network_id_bits(network_id)
    return HRP_MAINNET if network_id else HRP_TESTNET


def stake_hrp(network_id: int) -> str:
    network_id_bits(network_id)
    return STAKE_HRP_MAINNET if network_id else STAKE_HRP_TESTNET


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressRecord:
    address: str
    address_type: int
    network_id: int
    payment_hash: str  # hex
    stake_hash: str = ""  # hex; "" when the type carries no staking part
    stake_address: Optional[str] = None  # None when the type has no stake form

    @property
    def type_name(self) -> str:
        return AddressType(self.address_type).name.lower()

    @property
    def network_name(self) -> str:
        return NetworkId(self.network_id).name.lower()

    @property
    def is_mainnet(self) -> bool:
        return self.network_id == NetworkId.MAINNET

    @property
    def has_stake_credential(self) -> bool:
        return self.stake_address is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "addressType": self.address_type,
            "networkId": self.network_id,
            "paymentHash": self.payment_hash,
            "stakeHash": self.stake_hash,
            "stakeAddress": self.stake_address,
        }


@dataclass(frozen=True)
class StakeAddressRecord:
    address: str
    network_id: int
    credential: str  # "key" | "script"
    stake_hash: str  # hex

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "networkId": self.network_id,
            "credential": self.credential,
            "stakeHash": self.stake_hash,
        }


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _normalize_hash(value: str) -> str:
    return to_hex(from_hex(value)) if value else ""


def _check_hash_size(value: str, field: str) -> None:
    if len(value) != 2 * HASH_SIZE:
        raise InvalidHashLength(field=field, length=len(value) // 2)


def encode_cardano_stake_address(
    network_id: int, address_type: int, stake_hash: str
) -> Optional[str]:
    """
    Build the stake address that shares `stake_hash` with an address of
    `address_type`. Returns None for types without a stake form (4..7)
    and when `stake_hash` is empty.
    """
    prefix = STAKE_PREFIX_BITS.get(address_type)
    if prefix is None or not stake_hash:
        return None
    header = (prefix << 4) | network_id_bits(network_id)
    payload = bytes([header]) + from_hex(stake_hash)
    return _b32.bech32_encode(stake_hrp(network_id), _b32.bytes_to_words(payload))


def encode_cardano_address(
    address_type: int,
    network_id: int,
    payment_hash: str,
    stake_hash: str = "",
) -> AddressRecord:
    """
    Encode a Shelley address from its header fields and hex hashes.

    Raises MissingStakeHash when a base/pointer type (0..5) is requested
    without a stake hash, and InvalidHashLength when a payment hash or a
    base-address stake hash is not 28 bytes.
    """
    header = encode_address_header(address_type, network_id)
    if address_type < AddressType.ENTERPRISE_KEY and not stake_hash:
        raise MissingStakeHash(address_type=address_type)

    payment_hash = _normalize_hash(payment_hash)
    stake_hash = _normalize_hash(stake_hash)
    _check_hash_size(payment_hash, "payment_hash")
    if address_type in STAKE_PREFIX_BITS:
        _check_hash_size(stake_hash, "stake_hash")

    payload = bytes([header]) + from_hex(payment_hash) + from_hex(stake_hash)
    address = _b32.bech32_encode(address_hrp(network_id), _b32.bytes_to_words(payload))
    stake_address = encode_cardano_stake_address(network_id, address_type, stake_hash)

    log.debug(
        "address encoded",
        extra={"address_type": address_type, "network_id": network_id},
    )
    return AddressRecord(
        address=address,
        address_type=address_type,
        network_id=network_id,
        payment_hash=payment_hash,
        stake_hash=stake_hash,
        stake_address=stake_address,
    )


# ---------------------------------------------------------------------------
# Decoding / Validation
# ---------------------------------------------------------------------------


def decode_cardano_address(address: str) -> AddressRecord:
    """
    Parse a Shelley address into its header fields, hashes and derived
    stake address.
    """
    if not address.startswith(ADDRESS_PREFIX):
        raise NotCardanoAddress(prefix=address[: len(ADDRESS_PREFIX)])

    hrp, words = _b32.bech32_decode(address)
    payload = _b32.words_to_bytes(words)
    if not payload:
        raise NotCardanoAddress("Address carries no header byte")

    address_type, network_id = decode_address_header(payload[0])

    if network_id and hrp != HRP_MAINNET:
        raise HrpNetworkMismatch(hrp=hrp, network_id=network_id)
    if not network_id and hrp != HRP_TESTNET:
        raise HrpNetworkMismatch(hrp=hrp, network_id=network_id)
    network_id_bits(network_id)

    body = payload[1:]
    if address_type in (0, 1, 2, 3):
        payment, staking = body[:HASH_SIZE], body[HASH_SIZE : 2 * HASH_SIZE]
    elif address_type in (4, 5):
        # pointer: variable-length remainder, passed through unparsed
        payment, staking = body[:HASH_SIZE], body[HASH_SIZE:]
    elif address_type in (6, 7):
        payment, staking = body[:HASH_SIZE], b""
    else:
        raise UnknownAddressType(address_type=address_type)

    stake_hash = to_hex(staking)
    stake_address = (
        encode_cardano_stake_address(network_id, address_type, stake_hash) if staking else None
    )

    log.debug(
        "address decoded",
        extra={"address_type": address_type, "network_id": network_id},
    )
    return AddressRecord(
        address=address,
        address_type=address_type,
        network_id=network_id,
        payment_hash=to_hex(payment),
        stake_hash=stake_hash,
        stake_address=stake_address,
    )


def decode_cardano_stake_address(address: str) -> StakeAddressRecord:
    """
    Parse a stake address (stake1… / stake_test1…) back into its network,
    credential kind and staking hash.
    """
    if not address.startswith(STAKE_HRP_MAINNET):
        raise NotStakeAddress(prefix=address[: len(STAKE_HRP_MAINNET)])

    hrp, words = _b32.bech32_decode(address)
    payload = _b32.words_to_bytes(words)
    if not payload:
        raise NotStakeAddress("Stake address carries no header byte")

    prefix, network_id = decode_address_header(payload[0])
    if prefix == STAKE_KEY_PREFIX:
        credential = "key"
    elif prefix == STAKE_SCRIPT_PREFIX:
        credential = "script"
    else:
        raise UnknownAddressType(f"Unknown stake address type {prefix}", address_type=prefix)

    if network_id and hrp != STAKE_HRP_MAINNET:
        raise HrpNetworkMismatch(hrp=hrp, network_id=network_id)
    if not network_id and hrp != STAKE_HRP_TESTNET:
        raise HrpNetworkMismatch(hrp=hrp, network_id=network_id)
    network_id_bits(network_id)

    return StakeAddressRecord(
        address=address,
        network_id=network_id,
        credential=credential,
        stake_hash=to_hex(payload[1:]),
    )


def is_valid_cardano_address(address: str) -> bool:
    """
    Lightweight validator. Returns True if `address` decodes as a Shelley
    address, False on any codec error.
    """
    try:
        decode_cardano_address(address)
    except CardanoBech32Error:
        return False
    return True


__all__ = [
    "AddressType",
    "NetworkId",
    "AddressRecord",
    "StakeAddressRecord",
    "ADDRESS_TYPE_BITS",
    "NETWORK_ID_BITS",
    "STAKE_PREFIX_BITS",
    "address_type_bits",
    "network_id_bits",
    "encode_address_header",
    "decode_address_header",
    "encode_cardano_address",
    "decode_cardano_address",
    "encode_cardano_stake_address",
    "decode_cardano_stake_address",
    "is_valid_cardano_address",
]
