# SPDX-License-Identifier: Apache-2.0
"""
Stake address derivation and parsing.

Derivation returns None (not "" and not an error) for address types that
have no stake form; tests keep "no staking credential" apart from failure.
"""

from __future__ import annotations

import pytest

from cardano_bech32 import address as A
from cardano_bech32 import errors as E
from cardano_bech32.utils import bech32 as b32

KEY_STAKE = "29a9cfcea1da3a5947da46645c3344e75157d2685012ef3c6203eb50"
KEY_STAKE_ADDR = "stake1uy56nn7w58dr5k28mfrxghpngnn4z47jdpgp9meuvgp7k5qmhycnp"
SCRIPT_STAKE = "2c967f4bd28944b06462e13c5e3f5d5fa6e03f8567569438cd833e6d"
SCRIPT_STAKE_ADDR = "stake17ykfvl6t62y5fvryvtsnch3lt406dcpls4n4d9pcekpnumg6v83tq"


def _raw_stake(hrp: str, header: int, body_hex: str = KEY_STAKE) -> str:
    return b32.bech32_encode(hrp, b32.bytes_to_words(bytes([header]) + bytes.fromhex(body_hex)))


@pytest.mark.parametrize(
    "address_type, stake_hash, expected",
    [
        (0, KEY_STAKE, KEY_STAKE_ADDR),
        (3, SCRIPT_STAKE, SCRIPT_STAKE_ADDR),
    ],
)
def test_encode_stake_address_vectors(address_type, stake_hash, expected):
    assert A.encode_cardano_stake_address(1, address_type, stake_hash) == expected


def test_key_types_share_a_prefix():
    assert A.encode_cardano_stake_address(1, 0, KEY_STAKE) == A.encode_cardano_stake_address(1, 1, KEY_STAKE)
    assert A.encode_cardano_stake_address(1, 2, KEY_STAKE) == A.encode_cardano_stake_address(1, 3, KEY_STAKE)
    assert A.encode_cardano_stake_address(1, 0, KEY_STAKE) != A.encode_cardano_stake_address(1, 2, KEY_STAKE)


@pytest.mark.parametrize("address_type", [4, 5, 6, 7, 8])
def test_types_without_stake_form_return_none(address_type: int):
    assert A.encode_cardano_stake_address(1, address_type, KEY_STAKE) is None


@pytest.mark.parametrize("address_type", [0, 1, 2, 3])
def test_empty_stake_hash_returns_none(address_type: int):
    assert A.encode_cardano_stake_address(1, address_type, "") is None


def test_testnet_stake_hrp():
    s = A.encode_cardano_stake_address(0, 0, KEY_STAKE)
    assert s is not None and s.startswith("stake_test1")


def test_unknown_network_is_rejected():
    with pytest.raises(E.UnknownNetworkId):
        A.encode_cardano_stake_address(3, 0, KEY_STAKE)


# -- Parsing ------------------------------------------------------------------


def test_decode_key_stake_address():
    rec = A.decode_cardano_stake_address(KEY_STAKE_ADDR)
    assert rec.network_id == 1
    assert rec.credential == "key"
    assert rec.stake_hash == KEY_STAKE
    assert rec.to_dict() == {
        "address": KEY_STAKE_ADDR,
        "networkId": 1,
        "credential": "key",
        "stakeHash": KEY_STAKE,
    }


def test_decode_script_stake_address():
    rec = A.decode_cardano_stake_address(SCRIPT_STAKE_ADDR)
    assert rec.credential == "script"
    assert rec.stake_hash == SCRIPT_STAKE


def test_decode_testnet_stake_address_round_trip():
    s = A.encode_cardano_stake_address(0, 2, SCRIPT_STAKE)
    rec = A.decode_cardano_stake_address(s)
    assert (rec.network_id, rec.credential, rec.stake_hash) == (0, "script", SCRIPT_STAKE)


def test_decode_rejects_payment_address():
    with pytest.raises(E.NotStakeAddress):
        A.decode_cardano_stake_address("addr1vyntqn4yflcsjj2akudmxwjq0anmk99ut9zmghk7qe99jpcg69wvw")


def test_decode_rejects_hrp_network_mismatch():
    with pytest.raises(E.HrpNetworkMismatch):
        A.decode_cardano_stake_address(_raw_stake("stake_test", 0xE1))


def test_decode_rejects_non_stake_header():
    with pytest.raises(E.UnknownAddressType):
        A.decode_cardano_stake_address(_raw_stake("stake", 0x61))


def test_decode_rejects_empty_payload():
    with pytest.raises(E.NotStakeAddress):
        A.decode_cardano_stake_address(b32.bech32_encode("stake", []))
