"""Preconditions of fund trading operations.

Each check is an independent, side-effect free object with a single
``evaluate`` method. A ``ValidationPipeline`` runs the checklist of an
operation concurrently and raises the first failure in checklist order once
every check has finished.
"""

import asyncio
from collections.abc import Sequence
from decimal import Decimal

from web3 import Web3

from src.melon_client.api.environment import Environment
from src.melon_client.contracts.hub import Hub
from src.melon_client.contracts.token import Token
from src.melon_client.contracts.trading import Trading
from src.melon_client.core.exceptions import (
    CooldownForMakerAssetNotReachedError,
    ExistingOpenMakeOrderError,
    FundIsShutDownError,
    OutOfBalanceError,
    SenderIsNotManagerError,
)
from src.melon_client.core.interfaces import ValidationCheck
from src.melon_client.utils.address import same_address
from src.melon_client.utils.logger import get_logger

logger = get_logger(__name__)


class ValidationContext:
    """What a check may look at: the fund's trading contract and the sender."""

    def __init__(self, trading: Trading, sender: str):
        self.trading = trading
        self.sender = sender

    @property
    def environment(self) -> Environment:
        return self.trading.environment

    async def get_hub(self) -> Hub:
        return Hub(self.environment, await self.trading.get_hub())

    async def get_vault_address(self) -> str:
        routes = await self.trading.get_routes()
        return routes.vault

    async def get_block_timestamp(self) -> int:
        return await self.environment.get_block_timestamp("latest")


class SenderIsFundManager(ValidationCheck):
    """The sender must be the manager of the fund."""

    async def evaluate(self, context: ValidationContext) -> None:
        hub = await context.get_hub()
        manager = await hub.get_manager()
        if not same_address(manager, context.sender):
            raise SenderIsNotManagerError(context.sender, manager)


class SufficientBalance(ValidationCheck):
    """The fund's vault must hold at least the given amount of a token."""

    def __init__(self, token: str, amount: int):
        self.token = token
        self.amount = amount

    async def evaluate(self, context: ValidationContext) -> None:
        vault = await context.get_vault_address()
        balance = await Token(context.environment, self.token).balance_of(vault)
        amount = Decimal(Web3.from_wei(self.amount, "ether"))
        if balance < amount:
            raise OutOfBalanceError(amount, balance)


class FundIsNotShutDown(ValidationCheck):
    """The fund must not have been shut down."""

    async def evaluate(self, context: ValidationContext) -> None:
        hub = await context.get_hub()
        if await hub.is_shut_down():
            raise FundIsShutDownError(hub.address)


class NoExistingOpenMakeOrder(ValidationCheck):
    """The fund must not already offer the asset in an open make order."""

    def __init__(self, asset: str):
        self.asset = asset

    async def evaluate(self, context: ValidationContext) -> None:
        if await context.trading.is_in_open_make_order(self.asset):
            raise ExistingOpenMakeOrderError(self.asset)


class CooldownReached(ValidationCheck):
    """The cooldown since the asset's last make order must have passed."""

    def __init__(self, asset: str):
        self.asset = asset

    async def evaluate(self, context: ValidationContext) -> None:
        cooldown_end, now = await asyncio.gather(
            context.trading.get_maker_asset_cooldown(self.asset),
            context.get_block_timestamp(),
        )
        if now < cooldown_end:
            raise CooldownForMakerAssetNotReachedError(self.asset, cooldown_end)


class ExchangeIsRegistered(ValidationCheck):
    """The exchange must be registered with the fund's trading contract."""

    def __init__(self, exchange: str):
        self.exchange = exchange

    async def evaluate(self, context: ValidationContext) -> None:
        # Raises ExchangeNotRegisteredWithFundError
        await context.trading.get_exchange_index(self.exchange)


class ValidationPipeline:
    """Runs the checklist of one operation."""

    def __init__(self, operation: str, checks: Sequence[ValidationCheck]):
        self.operation = operation
        self.checks = list(checks)

    async def run(self, context: ValidationContext) -> None:
        """Run all checks concurrently.

        Every check is launched and awaited even when another one fails.
        When several fail, the error of the earliest check in the checklist
        is raised.

        Args:
            context: Validation context of the operation

        Raises:
            ValidationError: The first failure in checklist order
        """
        results = await asyncio.gather(
            *(check.evaluate(context) for check in self.checks),
            return_exceptions=True,
        )

        failures = [
            (check, result)
            for check, result in zip(self.checks, results, strict=True)
            if isinstance(result, BaseException)
        ]
        if not failures:
            logger.debug("Validation passed", operation=self.operation, checks=len(self.checks))
            return

        check, error = failures[0]
        logger.warning(
            "Validation failed",
            operation=self.operation,
            sender=context.sender,
            check=type(check).__name__,
            error=str(error),
            failed_checks=[type(c).__name__ for c, _ in failures],
        )
        raise error
