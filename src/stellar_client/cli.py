"""Command line interface for Stellar Client."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import httpx
from rich.console import Console
from rich.table import Table

from . import __version__
from .asset import ASSET_TYPE_NATIVE, ASSET_TYPE_POOL_SHARE
from .config import ClientConfig, ConfigManager, get_network
from .horizon import HorizonRequestError, StellarSDK
from .sep06 import TransferServerService

console = Console()


def _load_config(ctx) -> ClientConfig:
    config: ClientConfig = ctx.obj["config_manager"].get_config()
    updates = {}
    if ctx.obj.get("network"):
        updates["horizon_url"] = get_network(ctx.obj["network"]).horizon_url
    if ctx.obj.get("horizon_url"):
        updates["horizon_url"] = ctx.obj["horizon_url"]
    if updates:
        config = config.model_copy(update=updates)
    return config


@click.group()
@click.option("--config", "-c", type=click.Path(exists=False), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option(
    "--network",
    "-n",
    type=click.Choice(["public", "testnet", "futurenet"]),
    help="Well known Horizon network to query",
)
@click.option("--horizon-url", help="Horizon server URL (overrides --network)")
@click.version_option(version=__version__, prog_name="stellar-client")
@click.pass_context
def cli(
    ctx,
    config: Optional[str],
    verbose: bool,
    network: Optional[str],
    horizon_url: Optional[str],
):
    """Query Horizon and SEP-06 anchors from the terminal.

    \b
    EXAMPLES:
      stellar-client --network testnet account GABC...
      stellar-client fee-stats
      stellar-client anchor-info https://testanchor.stellar.org/sep6
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["network"] = network
    ctx.obj["horizon_url"] = horizon_url

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    ctx.obj["config_manager"] = ConfigManager(Path(config) if config else None)


@cli.command()
@click.argument("account_id")
@click.pass_context
def account(ctx, account_id: str):
    """Show the balances of an account."""
    try:
        with StellarSDK(config=_load_config(ctx)) as sdk:
            result = sdk.request_account(account_id)
    except HorizonRequestError as e:
        console.print(f"❌ Failed to load account: {e.message}", style="red")
        sys.exit(1)

    table = Table(title=f"Account {account_id}")
    table.add_column("Asset", style="cyan")
    table.add_column("Issuer", style="magenta")
    table.add_column("Balance", justify="right", style="green")
    for balance in result.balances:
        if balance.asset_type == ASSET_TYPE_NATIVE:
            asset_name = "XLM"
        elif balance.asset_type == ASSET_TYPE_POOL_SHARE:
            asset_name = f"pool {balance.liquidity_pool_id}"
        else:
            asset_name = balance.asset_code or ""
        table.add_row(asset_name, balance.asset_issuer or "", balance.balance or "")
    console.print(table)
    console.print(f"Sequence: {result.sequence}")


@cli.command("fee-stats")
@click.pass_context
def fee_stats(ctx):
    """Show the fee percentiles of recent ledgers."""
    try:
        with StellarSDK(config=_load_config(ctx)) as sdk:
            stats = sdk.request_fee_stats()
    except HorizonRequestError as e:
        console.print(f"❌ Failed to load fee stats: {e.message}", style="red")
        sys.exit(1)

    table = Table(title=f"Fee stats (ledger {stats.last_ledger})")
    table.add_column("Percentile", style="cyan")
    table.add_column("Fee charged", justify="right", style="green")
    table.add_column("Max fee", justify="right", style="magenta")
    for name in ("min", "mode", "p10", "p50", "p90", "p99", "max"):
        charged = getattr(stats.fee_charged, name, None) if stats.fee_charged else None
        max_fee = getattr(stats.max_fee, name, None) if stats.max_fee else None
        table.add_row(name, charged or "-", max_fee or "-")
    console.print(table)


@cli.command()
@click.pass_context
def root(ctx):
    """Show Horizon and Stellar Core versions."""
    try:
        with StellarSDK(config=_load_config(ctx)) as sdk:
            info = sdk.root()
    except HorizonRequestError as e:
        console.print(f"❌ Failed to reach Horizon: {e.message}", style="red")
        sys.exit(1)

    console.print(f"Horizon: {info.horizon_version}")
    console.print(f"Core: {info.core_version}")
    console.print(f"Network: {info.network_passphrase}")
    console.print(f"Latest ledger: {info.history_latest_ledger}")


@cli.command("anchor-info")
@click.argument("transfer_server_url")
@click.option("--jwt", help="SEP-10 token for anchors that require authentication")
@click.pass_context
def anchor_info(ctx, transfer_server_url: str, jwt: Optional[str]):
    """List the assets a SEP-06 transfer server supports."""
    config = _load_config(ctx)
    try:
        with TransferServerService(transfer_server_url, config=config) as service:
            info = service.info(jwt=jwt)
    except httpx.HTTPError as e:
        console.print(f"❌ Failed to load anchor info: {e}", style="red")
        sys.exit(1)

    table = Table(title="Anchor assets")
    table.add_column("Asset", style="cyan")
    table.add_column("Deposit", style="green")
    table.add_column("Withdraw", style="green")
    table.add_column("Withdraw types", style="magenta")
    for code in sorted(set(info.deposit) | set(info.withdraw)):
        deposit = info.deposit.get(code)
        withdraw = info.withdraw.get(code)
        types = ", ".join(sorted(withdraw.types)) if withdraw and withdraw.types else ""
        table.add_row(
            code,
            "✅" if deposit and deposit.enabled else "❌",
            "✅" if withdraw and withdraw.enabled else "❌",
            types,
        )
    console.print(table)


def main():
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
