"""
Shared plumbing for the cardano-bech32 commands: config lookup, output
rendering and error reporting.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import typer

from cardano_bech32 import config
from cardano_bech32 import logging as clog
from cardano_bech32.address import NetworkId
from cardano_bech32.errors import CardanoBech32Error

log = clog.get_logger("cardano_bech32.cli")


def current_config(ctx: Optional[typer.Context]) -> config.Config:
    """Config loaded by the root callback, or a fresh load when a sub-app runs on its own."""
    obj = ctx.obj if ctx is not None else None
    if isinstance(obj, config.Config):
        return obj
    return config.load()


def resolve_network(ctx: Optional[typer.Context], network: Optional[str]) -> NetworkId:
    if network is None:
        return current_config(ctx).network
    return config.parse_network(network)


def fail(err: CardanoBech32Error) -> None:
    log.debug("command failed", extra={"code": err.code_str, "data": err.data})
    typer.echo(f"error: {err.code_str}: {err.message}", err=True)
    raise typer.Exit(1)


@contextmanager
def reporting(command: str) -> Iterator[None]:
    """
    Run a command body under a fresh trace id and turn codec errors into
    `error: <code>: <message>` on stderr with exit status 1.
    """
    with clog.trace_scope():
        clog.bind(command=command)
        try:
            yield
        except CardanoBech32Error as e:
            fail(e)


def emit(payload: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    for key, value in payload.items():
        typer.echo(f"{key}: {'-' if value is None else value}")
