"""
Property tests for the Bech32 engine and bit converter.
"""
from __future__ import annotations

import pytest

from cardano_bech32 import errors as E
from cardano_bech32.utils import bech32 as b32

from tests.property import given, hrps, st, word_lists


@given(hrps(), word_lists())
def test_round_trip(hrp: str, words):
    s = b32.bech32_encode(hrp, words)
    assert s == s.lower()
    assert b32.bech32_decode(s) == (hrp.lower(), words)


@given(hrps(), word_lists())
def test_case_invariance(hrp: str, words):
    s = b32.bech32_encode(hrp, words)
    assert b32.bech32_decode(s.upper()) == b32.bech32_decode(s)


@given(hrps(max_size=20), word_lists(max_size=60), st.data())
def test_single_character_corruption_is_detected(hrp: str, words, data):
    s = b32.bech32_encode(hrp, words)
    data_start = s.rindex("1") + 1
    pos = data.draw(st.integers(min_value=data_start, max_value=len(s) - 1), label="pos")
    replacement = data.draw(
        st.sampled_from([c for c in b32.CHARSET if c != s[pos]]), label="replacement"
    )
    corrupted = s[:pos] + replacement + s[pos + 1 :]
    with pytest.raises(E.InvalidChecksum):
        b32.bech32_decode(corrupted)


@given(st.binary(max_size=256))
def test_bit_conversion_is_exact_for_whole_bytes(raw: bytes):
    words = b32.convertbits(raw, 8, 5, pad=True)
    assert all(0 <= w < 32 for w in words)
    assert len(words) == (len(raw) * 8 + 4) // 5
    assert bytes(b32.convertbits(words, 5, 8, pad=False)) == raw


@given(st.binary(max_size=64))
def test_hex_helpers_agree_with_byte_helpers(raw: bytes):
    assert b32.hex_to_words(raw.hex()) == b32.bytes_to_words(raw)
    assert b32.words_to_hex(b32.bytes_to_words(raw)) == raw.hex()
