"""CLI entry point for pinning across every configured service."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Awaitable, Callable, TypeVar

import click
import httpx

from pinning_aggregation.aggregation import PinningAggregation
from pinning_aggregation.config import load_config
from pinning_aggregation.errors import PinningError
from pinning_aggregation.ipfs import IpfsPinning, KuboClient
from pinning_aggregation.models.config import AggregationConfig
from pinning_aggregation.models.records import PinningContext

log = logging.getLogger(__name__)

T = TypeVar("T")

# Backend variants linked into this CLI
DEFAULT_PINNERS = (IpfsPinning,)


def _require_connection_strings(cfg: AggregationConfig) -> None:
    """Exit with error if no connection string is configured."""
    if not cfg.connection_strings:
        click.echo("Error: No connection strings configured.", err=True)
        click.echo(
            "Pass -s/--connection-string, set PINNING_AGGREGATION_CONNECTION_STRINGS "
            "or connection_strings in config.",
            err=True,
        )
        sys.exit(1)


def _context(cfg: AggregationConfig) -> PinningContext:
    ipfs = None
    if cfg.ipfs_context_url:
        ipfs = KuboClient(cfg.ipfs_context_url, timeout=cfg.ipfs_timeout)
    return PinningContext(ipfs=ipfs, kubo_timeout=cfg.ipfs_timeout)


async def _with_aggregation(
    cfg: AggregationConfig,
    operation: Callable[[PinningAggregation], Awaitable[T]],
    open_backends: bool = True,
) -> T:
    context = _context(cfg)
    try:
        aggregation = await PinningAggregation.build(
            context, cfg.connection_strings, DEFAULT_PINNERS,
        )
        if not open_backends:
            return await operation(aggregation)
        try:
            await aggregation.open()
            result = await operation(aggregation)
        except BaseException:
            # Keep the first failure; a close error here is only logged
            try:
                await aggregation.close()
            except Exception:
                log.warning("Closing backends after a failure also failed", exc_info=True)
            raise
        await aggregation.close()
        return result
    finally:
        if context.ipfs is not None:
            await context.ipfs.aclose()


def _run(
    cfg: AggregationConfig,
    operation: Callable[[PinningAggregation], Awaitable[T]],
    open_backends: bool = True,
) -> T:
    _require_connection_strings(cfg)
    try:
        return asyncio.run(_with_aggregation(cfg, operation, open_backends))
    except PinningError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except httpx.HTTPError as exc:
        log.debug("Backend request failed", exc_info=True)
        click.echo(f"Error: backend request failed: {exc}", err=True)
        sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-s", "--connection-string", "connection_strings", multiple=True,
    help="Pinning service to use, e.g. ipfs://127.0.0.1:5001 (repeatable, overrides config)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    verbose: bool,
    connection_strings: tuple[str, ...],
) -> None:
    """pinning-aggregation - Pin content on several pinning services at once."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    if connection_strings:
        cfg.connection_strings = list(connection_strings)
    ctx.obj["config"] = cfg

    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and the backends it resolves to."""
    cfg: AggregationConfig = ctx.obj["config"]
    click.echo(f"Log level:    {cfg.log_level}")
    click.echo(f"IPFS timeout: {cfg.ipfs_timeout:g}s")
    click.echo(f"IPFS context: {cfg.ipfs_context_url or '(not set)'}")

    async def _status(aggregation: PinningAggregation) -> None:
        click.echo(f"Aggregation:  {aggregation.id}")
        for connection_string, backend in zip(cfg.connection_strings, aggregation.backends):
            click.echo(f"  {backend.id}  {connection_string}")

    _run(cfg, _status, open_backends=False)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Print diagnostic info from every backend as JSON."""
    cfg: AggregationConfig = ctx.obj["config"]

    async def _info(aggregation: PinningAggregation) -> None:
        click.echo(json.dumps(await aggregation.info(), indent=2, sort_keys=True))

    _run(cfg, _info)


# ── Pins ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def ls(ctx: click.Context) -> None:
    """List pinned CIDs and the backends holding them."""
    cfg: AggregationConfig = ctx.obj["config"]

    async def _ls(aggregation: PinningAggregation) -> None:
        pins = await aggregation.ls()
        if not pins:
            click.echo("No pins.")
            return
        for cid, ids in sorted(pins.items()):
            click.echo(f"{cid}  {', '.join(ids)}")

    _run(cfg, _ls)


@cli.command()
@click.argument("cid")
@click.pass_context
def pin(ctx: click.Context, cid: str) -> None:
    """Pin CID on every backend."""
    cfg: AggregationConfig = ctx.obj["config"]

    async def _pin(aggregation: PinningAggregation) -> None:
        await aggregation.pin(cid)
        click.echo(f"Pinned {cid} on {len(aggregation.backends)} backends")

    _run(cfg, _pin)


@cli.command()
@click.argument("cid")
@click.pass_context
def unpin(ctx: click.Context, cid: str) -> None:
    """Unpin CID from every backend (best effort)."""
    cfg: AggregationConfig = ctx.obj["config"]

    async def _unpin(aggregation: PinningAggregation) -> None:
        await aggregation.unpin(cid)
        click.echo(f"Unpin of {cid} requested on {len(aggregation.backends)} backends")

    _run(cfg, _unpin)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
