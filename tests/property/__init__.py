# -*- coding: utf-8 -*-
"""
tests.property package bootstrap.

Shared configuration for property-based tests (Hypothesis).

What this does on import:
- Registers a few named Hypothesis profiles (dev/ci/fast/stress).
- Selects the active profile using HYPOTHESIS_PROFILE, otherwise "ci" on CI
  (CI env var present/truthy) and "dev" locally.
- Exposes the strategies shared by the codec property tests.

Usage in tests:
    from tests.property import given, st, hrps, word_lists

    @given(hrps(), word_lists())
    def test_something_roundtrips(hrp, words):
        ...

Environment knobs:
- HYPOTHESIS_PROFILE=dev|ci|fast|stress
- CI=true (auto-pick the 'ci' profile if HYPOTHESIS_PROFILE not set)
"""
from __future__ import annotations

import os
from typing import Final, Tuple

from hypothesis import HealthCheck, Verbosity, given, settings
from hypothesis import strategies as st

# ---- profile registry --------------------------------------------------------


def _hc(*items: HealthCheck) -> Tuple[HealthCheck, ...]:
    return items


settings.register_profile(
    "dev",
    settings(
        max_examples=100,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow, HealthCheck.filter_too_much),
        verbosity=Verbosity.normal,
        derandomize=False,
    ),
)

settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow, HealthCheck.filter_too_much),
        verbosity=Verbosity.verbose,
        derandomize=True,
    ),
)

settings.register_profile(
    "fast",
    settings(
        max_examples=25,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow),
        verbosity=Verbosity.normal,
        derandomize=False,
    ),
)

settings.register_profile(
    "stress",
    settings(
        max_examples=2000,
        deadline=None,
        suppress_health_check=_hc(
            HealthCheck.too_slow,
            HealthCheck.filter_too_much,
            HealthCheck.data_too_large,
        ),
        verbosity=Verbosity.normal,
        derandomize=True,
    ),
)


def _env_truthy(name: str) -> bool:
    v = os.getenv(name)
    return (v or "").lower() not in ("", "0", "false", "no", "off")


_active: Final[str] = os.getenv("HYPOTHESIS_PROFILE") or (
    "ci" if _env_truthy("CI") else "dev"
)
settings.load_profile(_active)

# ---- shared strategies -------------------------------------------------------

# Printable US-ASCII without upper-case letters, so any draw is single-case.
HRP_ALPHABET: Final[str] = "".join(
    chr(c) for c in range(0x21, 0x7F) if not ("A" <= chr(c) <= "Z")
)


def hrps(max_size: int = 83):
    """HRPs of 1..max_size printable characters, optionally all upper-cased."""
    base = st.text(alphabet=HRP_ALPHABET, min_size=1, max_size=max_size)
    return st.one_of(base, base.map(str.upper))


def word_lists(max_size: int = 120):
    return st.lists(st.integers(min_value=0, max_value=31), max_size=max_size)


def hashes(size: int = 28):
    return st.binary(min_size=size, max_size=size)


def active_profile() -> str:
    """Return the name of the active Hypothesis profile."""
    return _active


__all__ = [
    "st",
    "given",
    "hrps",
    "word_lists",
    "hashes",
    "active_profile",
]
