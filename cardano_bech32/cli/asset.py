"""
cardano_bech32.cli.asset
========================

Native asset fingerprint commands (CIP-0014).

Usage
-----
cardano-bech32 asset fingerprint 7eae28af2208be856f7a119668ae52a49b73725e326dc16579dcc373 504154415445
cardano-bech32 asset decode asset13n25uv0yaf5kus35fm2k86cqy60z58d9xmde92
"""

from __future__ import annotations

import typer

from cardano_bech32 import asset as nat
from cardano_bech32.cli._common import emit, reporting

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Native asset fingerprints")


@app.command("fingerprint")
def fingerprint(
    policy_id: str = typer.Argument(..., help="Policy id (hex, 28 bytes)"),
    asset_name: str = typer.Argument("", help="Asset name (hex, up to 32 bytes)"),
    as_json: bool = typer.Option(False, "--json", help="Emit fingerprint, digest and inputs as JSON"),
) -> None:
    """Compute the asset1… fingerprint of a policy id / asset name pair."""
    with reporting("asset-fingerprint"):
        fp = nat.fingerprint(policy_id, asset_name)
        if as_json:
            emit(fp.to_dict(), True)
        else:
            typer.echo(fp.fingerprint)


@app.command("decode")
def decode(
    value: str = typer.Argument(..., help="Fingerprint (asset1…)"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON object"),
) -> None:
    """Print the 20-byte digest carried by a fingerprint."""
    with reporting("asset-decode"):
        digest = nat.decode_native_asset(value)
        if as_json:
            emit({"fingerprint": value, "digest": digest}, True)
        else:
            typer.echo(digest)
