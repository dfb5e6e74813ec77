"""
cardano_bech32.cli
------------------
Command-line entrypoints for the codec:

- decode        : Bech32 string → {hrp, words}
- encode        : HRP + 5-bit words → Bech32 string
- address …     : CIP-0019 address decode/encode, stake address derive/decode
- asset …       : CIP-0014 fingerprint compute/decode
- version       : print the package version

Global options (`--config`, `--log-level`, `--log-format`) are resolved
through `cardano_bech32.config` and applied once before any command runs.

Usage:
  python -m cardano_bech32.cli                  # help
  cardano-bech32 decode addr10pqtlnyq06v
  cardano-bech32 address decode -h             # help for a subcommand
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer

from cardano_bech32 import config
from cardano_bech32 import logging as clog
from cardano_bech32.cli import address as address_cmd
from cardano_bech32.cli import asset as asset_cmd
from cardano_bech32.cli._common import fail, reporting
from cardano_bech32.errors import ConfigError
from cardano_bech32.utils import bech32 as _b32
from cardano_bech32.version import __version__  # re-exported

__all__ = ["build_app", "main", "__version__"]

PROG_NAME = "cardano-bech32"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit(0)


def build_app() -> typer.Typer:
    """
    Build and return the root Typer app.
    """
    app = typer.Typer(
        name=PROG_NAME,
        help="Bech32 codec with Cardano address and asset fingerprint tools",
        no_args_is_help=True,
        add_completion=False,
    )

    @app.callback()
    def _meta(
        ctx: typer.Context,
        version: bool = typer.Option(
            False,
            "--version",
            "-V",
            help="Print version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
        config_file: Optional[Path] = typer.Option(
            None, "--config", "-c", help="TOML/JSON config file (default: $CARDANO_BECH32_CONFIG)"
        ),
        log_level: Optional[str] = typer.Option(None, "--log-level", help="CRITICAL|ERROR|WARNING|INFO|DEBUG"),
        log_format: Optional[str] = typer.Option(None, "--log-format", help="text|json"),
    ) -> None:
        try:
            cfg = config.load(config_file, log_level=log_level, log_format=log_format)
        except ConfigError as e:
            fail(e)
        clog.configure(json=cfg.log_format == "json", level=cfg.log_level, stream=sys.stderr)
        ctx.obj = cfg

    @app.command("decode")
    def decode(value: str = typer.Argument(..., help="Bech32 string")) -> None:
        """Decode a Bech32 string into its HRP and 5-bit data words."""
        with reporting("decode"):
            clog.bind(hrp=value.rpartition("1")[0].lower())
            hrp, words = _b32.bech32_decode(value)
            typer.echo(json.dumps({"hrp": hrp, "words": words}, separators=(",", ":")))

    @app.command("encode")
    def encode(
        hrp: str = typer.Argument(..., help="Human-readable part"),
        words: List[int] = typer.Argument(..., help="5-bit data words (0..31)"),
    ) -> None:
        """Encode an HRP and 5-bit data words as a Bech32 string."""
        with reporting("encode"):
            clog.bind(hrp=hrp)
            typer.echo(_b32.bech32_encode(hrp, words))

    @app.command("version")
    def version_cmd() -> None:
        """Print the package version."""
        typer.echo(__version__)

    app.add_typer(address_cmd.app, name="address")
    app.add_typer(asset_cmd.app, name="asset")
    return app


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entrypoint used by the `cardano-bech32` script and `python -m cardano_bech32.cli`.
    """
    app = build_app()
    # Typer exits the process itself; the return keeps the signature for tests.
    app(args=argv, prog_name=PROG_NAME)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
