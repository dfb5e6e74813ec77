"""
Version helpers for cardano_bech32.

- Exposes __version__ (PEP 440).
- Best-effort detection from:
    1) CARDANO_BECH32_VERSION env var (authoritative override)
    2) installed distribution metadata (`cardano-bech32`)
    3) fallback DEFAULT_VERSION for source checkouts

This module has **no external dependencies** and is safe to import very early.
"""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version as _pkg_version

DIST_NAME = "cardano-bech32"

# Project default if the distribution is not installed
DEFAULT_VERSION = "0.1.0"


def resolve_version() -> str:
    """
    Determine the version string in priority:
      1) CARDANO_BECH32_VERSION environment variable (verbatim)
      2) installed metadata
      3) DEFAULT_VERSION
    """
    env = os.getenv("CARDANO_BECH32_VERSION")
    if env:
        return env.strip()
    try:
        return _pkg_version(DIST_NAME)
    except PackageNotFoundError:  # local checkouts
        return DEFAULT_VERSION


__version__ = resolve_version()
