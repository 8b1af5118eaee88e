"""Command-line entry point for the Melon fund client."""

import asyncio
import sys
from collections.abc import Awaitable, Callable

import click
from dotenv import load_dotenv

from src.melon_client.api.environment import Environment
from src.melon_client.config.settings import Settings
from src.melon_client.contracts.engine import Engine
from src.melon_client.contracts.token import Token
from src.melon_client.contracts.trading import Trading
from src.melon_client.core.exceptions import MelonClientError
from src.melon_client.utils.logger import bind_context, configure_logging, get_logger

logger = get_logger(__name__)


def run_with_environment(
    ctx: click.Context, command: Callable[[Environment], Awaitable[None]]
) -> None:
    """Build the session environment from settings and run an async command in it."""
    bind_context(command=ctx.info_name)
    try:
        settings = Settings()
        environment = Environment.from_settings(settings)
        asyncio.run(command(environment))
    except MelonClientError as e:
        logger.error("Command failed", command=ctx.info_name, error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error("Fatal error", command=ctx.info_name, error=str(e), exc_info=True)
        click.echo(f"Fatal error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--env-file",
    type=click.Path(exists=True),
    default=None,
    help="Path to .env file (default: .env in the working directory)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Logging level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Output logs in JSON format instead of human-readable format",
)
def main(env_file: str | None, log_level: str, json_logs: bool) -> None:
    """Melon fund client - read protocol state and inspect funds.

    Configuration is loaded from MELON_* environment variables or a .env file.
    """
    if env_file:
        load_dotenv(env_file, override=True)

    configure_logging(log_level=log_level, json_logs=json_logs)


@main.command()
@click.argument("address")
@click.option("--block", type=int, default=None, help="Block number (default: latest)")
@click.pass_context
def engine(ctx: click.Context, address: str, block: int | None) -> None:
    """Print the accounting metrics of the engine at ADDRESS."""

    async def show(environment: Environment) -> None:
        contract = Engine(environment, address)
        (
            amgu_price,
            engine_price,
            frozen_ether,
            liquid_ether,
            premium_percent,
            registry,
            total_ether_consumed,
            total_amgu_consumed,
            total_mln_burned,
        ) = await asyncio.gather(
            contract.get_amgu_price(block),
            contract.get_engine_price(block),
            contract.get_frozen_ether(block),
            contract.get_liquid_ether(block),
            contract.get_premium_percent(block),
            contract.get_registry(block),
            contract.get_total_ether_consumed(block),
            contract.get_total_amgu_consumed(block),
            contract.get_total_mln_burned(block),
        )

        click.echo(f"Engine: {contract.address}")
        click.echo(f"  Registry: {registry}")
        click.echo(f"  Amgu price: {amgu_price}")
        click.echo(f"  Engine price: {engine_price}")
        click.echo(f"  Premium percent: {premium_percent}")
        click.echo(f"  Frozen ether: {frozen_ether}")
        click.echo(f"  Liquid ether: {liquid_ether}")
        click.echo(f"  Total ether consumed: {total_ether_consumed}")
        click.echo(f"  Total amgu consumed: {total_amgu_consumed}")
        click.echo(f"  Total MLN burned: {total_mln_burned}")

    run_with_environment(ctx, show)


@main.command()
@click.argument("trading_address")
@click.option("--block", type=int, default=None, help="Block number (default: latest)")
@click.pass_context
def exchanges(ctx: click.Context, trading_address: str, block: int | None) -> None:
    """List the exchanges registered with the trading contract at TRADING_ADDRESS."""

    async def show(environment: Environment) -> None:
        infos = await Trading(environment, trading_address).get_exchange_info(block)
        if not infos:
            click.echo("No exchanges registered")
            return

        for info in infos:
            custody = " (takes custody)" if info.takes_custody else ""
            click.echo(f"[{info.index}] {info.exchange} via adapter {info.adapter}{custody}")

    run_with_environment(ctx, show)


@main.command()
@click.argument("token_address")
@click.argument("owner")
@click.option("--block", type=int, default=None, help="Block number (default: latest)")
@click.pass_context
def balance(ctx: click.Context, token_address: str, owner: str, block: int | None) -> None:
    """Print the TOKEN_ADDRESS balance of OWNER."""

    async def show(environment: Environment) -> None:
        token = Token(environment, token_address)
        amount, symbol = await asyncio.gather(
            token.balance_of(owner, block), token.get_symbol(block)
        )
        click.echo(f"{amount} {symbol}")

    run_with_environment(ctx, show)


if __name__ == "__main__":
    main()
