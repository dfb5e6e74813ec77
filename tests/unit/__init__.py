# SPDX-License-Identifier: Apache-2.0
"""
tests.unit
==========

Small shared helpers for unit-test modules. Import from this package to keep
tests concise and consistent:

    from tests.unit import read_json_fixture

Paths
-----
- Repository root is inferred relative to this file.
- Reference vectors live under `tests/fixtures/` and are loaded via helpers.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Resolve repository root: tests/unit/__init__.py -> tests -> <root>
ROOT: Path = Path(__file__).resolve().parents[2]
FIXTURES: Path = ROOT / "tests" / "fixtures"

__all__ = [
    "ROOT",
    "FIXTURES",
    "read_text_fixture",
    "read_json_fixture",
]


def read_text_fixture(relpath: str) -> str:
    """
    Load a text fixture from `tests/fixtures/<relpath>` using UTF-8.

    Raises FileNotFoundError if the fixture does not exist.
    """
    path = (FIXTURES / relpath).resolve()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_json_fixture(relpath: str) -> Any:
    """
    Load a JSON fixture from `tests/fixtures/<relpath>` and return the parsed object.
    """
    return json.loads(read_text_fixture(relpath))
