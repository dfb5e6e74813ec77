"""
cardano_bech32.cli.address
==========================

Shelley address commands (CIP-0019).

Usage
-----
cardano-bech32 address decode addr1vyntqn4yflcsjj2akudmxwjq0anmk99ut9zmghk7qe99jpcg69wvw
cardano-bech32 address encode --type 6 --payment 26b04ea44ff109495db71bb33a407f67bb14bc5945b45ede064a5907
cardano-bech32 address stake --type 0 --network testnet --stake <28-byte hex>
cardano-bech32 address stake-decode stake1uy56nn7w58dr5k28mfrxghpngnn4z47jdpgp9meuvgp7k5qmhycnp

`--network` falls back to the configured default (mainnet unless
CARDANO_BECH32_NETWORK or the config file says otherwise).
"""

from __future__ import annotations

from typing import Optional

import typer

from cardano_bech32 import address as addr
from cardano_bech32.cli._common import emit, reporting, resolve_network

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Cardano Shelley addresses")

_NETWORK_HELP = "mainnet|testnet|1|0 (default from config)"


@app.command("decode")
def decode(
    address: str = typer.Argument(..., help="Bech32 address (addr1… / addr_test1…)"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON object"),
) -> None:
    """Split an address into type, network, hashes and derived stake address."""
    with reporting("address-decode"):
        rec = addr.decode_cardano_address(address)
        emit(rec.to_dict(), as_json)


@app.command("encode")
def encode(
    ctx: typer.Context,
    address_type: int = typer.Option(..., "--type", "-t", help="Address type 0..7"),
    payment: str = typer.Option(..., "--payment", "-p", help="Payment hash (hex, 28 bytes)"),
    stake: str = typer.Option("", "--stake", "-s", help="Staking hash or pointer bytes (hex)"),
    network: Optional[str] = typer.Option(None, "--network", "-n", help=_NETWORK_HELP),
    as_json: bool = typer.Option(False, "--json", help="Emit the full record as JSON"),
) -> None:
    """Build an address from its header fields and hashes."""
    with reporting("address-encode"):
        net = resolve_network(ctx, network)
        rec = addr.encode_cardano_address(address_type, int(net), payment, stake)
        if as_json:
            emit(rec.to_dict(), True)
        else:
            typer.echo(rec.address)


@app.command("stake")
def stake(
    ctx: typer.Context,
    address_type: int = typer.Option(..., "--type", "-t", help="Type of the owning address (0..3)"),
    stake_hash: str = typer.Option(..., "--stake", "-s", help="Staking hash (hex, 28 bytes)"),
    network: Optional[str] = typer.Option(None, "--network", "-n", help=_NETWORK_HELP),
) -> None:
    """Derive the stake address for a staking hash. Prints nothing for types 4..7."""
    with reporting("address-stake"):
        net = resolve_network(ctx, network)
        result = addr.encode_cardano_stake_address(int(net), address_type, stake_hash)
        if result is not None:
            typer.echo(result)


@app.command("stake-decode")
def stake_decode(
    address: str = typer.Argument(..., help="Stake address (stake1… / stake_test1…)"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON object"),
) -> None:
    """Parse a stake address into network, credential kind and staking hash."""
    with reporting("address-stake-decode"):
        rec = addr.decode_cardano_stake_address(address)
        emit(rec.to_dict(), as_json)
