"""
Shared pytest fixtures:
- Scrubbed CARDANO_BECH32_* environment for every test
- Typer CLI runner bound to a freshly built app
- Package logger reset after tests that reconfigure it
"""
from __future__ import annotations

import logging
import os

import pytest
from typer.testing import CliRunner

from cardano_bech32.cli import build_app
from cardano_bech32.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests must not pick up a developer's CARDANO_BECH32_* settings."""
    for key in list(os.environ):
        if key.startswith("CARDANO_BECH32_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app():
    return build_app()
