"""
cardano_bech32 configuration loader.

Goals
-----
- Zero external deps (stdlib only).
- Layered config with clear precedence:
    1) Explicit overrides passed to `load()` (highest)
    2) Environment variables (CARDANO_BECH32_*)
    3) Config file (TOML or JSON)
    4) Built-in defaults (lowest)
- A small typed dataclass with validation.

The codec functions themselves take every input explicitly; this module only
feeds the CLI its defaults:
  - network used when `--network` is omitted
  - log level and log format
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from cardano_bech32.address import NetworkId
from cardano_bech32.errors import ConfigError

# -- Optional TOML support (Python 3.11+ has tomllib).
try:  # py311+
    import tomllib as _toml  # type: ignore[attr-defined]
except ImportError:  # py310 or older: JSON files only
    _toml = None  # type: ignore[assignment]


ENV_PREFIX = "CARDANO_BECH32_"
ENV_CONFIG_FILE = ENV_PREFIX + "CONFIG"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMATS = ("text", "json")

_NETWORK_NAMES = {
    "mainnet": NetworkId.MAINNET,
    "main": NetworkId.MAINNET,
    "1": NetworkId.MAINNET,
    "testnet": NetworkId.TESTNET,
    "test": NetworkId.TESTNET,
    "0": NetworkId.TESTNET,
}


def parse_network(value: Any) -> NetworkId:
    """Accept a NetworkId, an int 0/1 or a name (mainnet/main/testnet/test)."""
    if isinstance(value, bool):
        raise ConfigError(f"invalid network: {value!r}", network=value)
    if isinstance(value, int):
        value = str(int(value))
    key = str(value).strip().lower()
    if key not in _NETWORK_NAMES:
        raise ConfigError(f"invalid network: {value!r}", network=str(value))
    return _NETWORK_NAMES[key]


# ------------------------------
# Typed configuration model
# ------------------------------

@dataclass
class Config:
    network: NetworkId = NetworkId.MAINNET
    log_level: str = "WARNING"
    log_format: str = "text"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["network"] = self.network.name.lower()
        return d


# ------------------------------
# File loader (TOML / JSON)
# ------------------------------

def _expand(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}", path=str(path))
    suffix = path.suffix.lower()
    with path.open("rb") as f:
        if suffix in {".toml", ".tml"}:
            if not _toml:
                raise ConfigError("tomllib is unavailable (Python < 3.11). Use a JSON config.")
            data = _toml.load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigError(f"unsupported config format: {suffix}. Use .toml or .json")
    if not isinstance(data, dict):
        raise ConfigError("config file must hold a table/object at top level", path=str(path))
    # Allow the settings to live under a [cardano_bech32] table.
    return dict(data.get("cardano_bech32", data))


def _from_env() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key in ("network", "log_level", "log_format"):
        v = os.environ.get(ENV_PREFIX + key.upper())
        if v is not None and v.strip():
            out[key] = v.strip()
    return out


# ------------------------------
# Main loader
# ------------------------------

def load(config_file: Optional[str | Path] = None, **overrides: Any) -> Config:
    """
    Load the CLI configuration.

    Precedence: overrides > env > file > defaults.

    Parameters
    ----------
    config_file : str | Path | None
        Optional TOML or JSON file with keys `network`, `log_level`,
        `log_format`. Falls back to $CARDANO_BECH32_CONFIG when omitted.
    overrides : Any
        Keyword overrides; `None` values are ignored so CLI options can be
        passed through unconditionally.
    """
    # 1) Defaults
    base: Dict[str, Any] = asdict(Config())

    # 2) File
    path = config_file or os.environ.get(ENV_CONFIG_FILE)
    if path:
        base.update(_load_file(_expand(path)))

    # 3) Env
    base.update(_from_env())

    # 4) Overrides (highest)
    base.update({k: v for k, v in overrides.items() if v is not None})

    unknown = set(base) - {"network", "log_level", "log_format"}
    if unknown:
        raise ConfigError(f"unknown config keys: {sorted(unknown)}")

    level = str(base["log_level"]).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"invalid log level: {base['log_level']!r}", log_level=str(base["log_level"]))
    fmt = str(base["log_format"]).strip().lower()
    if fmt not in LOG_FORMATS:
        raise ConfigError(f"invalid log format: {base['log_format']!r}", log_format=str(base["log_format"]))

    return Config(network=parse_network(base["network"]), log_level=level, log_format=fmt)
