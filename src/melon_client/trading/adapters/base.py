"""Exchange trading adapter protocol."""

from collections.abc import Sequence
from typing import Any

from src.melon_client.api.environment import Environment
from src.melon_client.config.abis import EXCHANGE_ADAPTER_ABI, function_signatures
from src.melon_client.config.constants import MAX_UINT256
from src.melon_client.contracts.trading import Trading
from src.melon_client.core.enums import ExchangeMethod
from src.melon_client.core.exceptions import (
    InvalidOrderIdentifierError,
    MissingOrderIdentifierError,
)
from src.melon_client.core.interfaces import ValidationCheck
from src.melon_client.models.exchange import CallOnExchangeArgs
from src.melon_client.trading.validation import (
    CooldownReached,
    FundIsNotShutDown,
    NoExistingOpenMakeOrder,
    SenderIsFundManager,
    SufficientBalance,
    ValidationContext,
    ValidationPipeline,
)
from src.melon_client.utils.address import to_checksum
from src.melon_client.utils.logger import get_logger

logger = get_logger(__name__)

# Adapter method signatures relayed through callOnExchange, resolved once
ADAPTER_METHOD_SIGNATURES = function_signatures(EXCHANGE_ADAPTER_ABI)


def method_signature(method: ExchangeMethod) -> str:
    """Canonical exchange adapter signature, e.g. "takeOrder(address,address[6],...)"."""
    return ADAPTER_METHOD_SIGNATURES[method.value]


def order_identifier(order_hash_hex: str | None = None, order_id: int | None = None) -> str:
    """Normalize an order hash or a numeric order id into a bytes32 identifier.

    Raises:
        MissingOrderIdentifierError: If neither is given
        InvalidOrderIdentifierError: If the order id does not fit in 256 bits
    """
    if order_hash_hex:
        return order_hash_hex
    if order_id is not None:
        if not 0 <= order_id <= MAX_UINT256:
            raise InvalidOrderIdentifierError(order_id)
        return f"0x{order_id:064x}"
    raise MissingOrderIdentifierError()


class BaseTradingAdapter:
    """Translates trading intents into callOnExchange calls of a fund.

    Operations build the normalized call arguments, run the operation's
    checklist and only then submit the call through the fund's trading
    contract. Each adapter defines only the operations its exchange
    supports: Kyber has no make or cancel orders.
    """

    def __init__(self, trading: Trading, exchange: str | None = None):
        """Initialize adapter.

        Args:
            trading: The fund's trading contract
            exchange: Address of the exchange this adapter trades on
        """
        self.trading = trading
        self.exchange = to_checksum(exchange) if exchange else None

    @property
    def environment(self) -> Environment:
        return self.trading.environment

    async def get_exchange_index(self, exchange: str | None = None) -> int:
        """Resolve the index of the exchange in the fund's exchange list.

        Raises:
            ExchangeNotRegisteredWithFundError: If the exchange is not registered
        """
        target = exchange or self.exchange
        if target is None:
            raise ValueError(f"{type(self).__name__} has no exchange address")
        return await self.trading.get_exchange_index(target)

    def take_order_checks(self, taker_token: str, amount: int) -> list[ValidationCheck]:
        return [SenderIsFundManager(), SufficientBalance(taker_token, amount)]

    def make_order_checks(self, maker_token: str, amount: int) -> list[ValidationCheck]:
        return [
            SufficientBalance(maker_token, amount),
            FundIsNotShutDown(),
            SenderIsFundManager(),
            NoExistingOpenMakeOrder(maker_token),
            CooldownReached(maker_token),
        ]

    def cancel_order_checks(self) -> list[ValidationCheck]:
        return [SenderIsFundManager()]

    async def submit(
        self,
        sender: str,
        args: CallOnExchangeArgs,
        checks: Sequence[ValidationCheck],
    ) -> dict[str, Any]:
        """Validate, then relay the call through the fund.

        Args:
            sender: Address of the sender
            args: Normalized call arguments
            checks: Checklist of the operation

        Returns:
            dict[str, Any]: Transaction receipt

        Raises:
            ValidationError: If any check fails; nothing is submitted then
        """
        operation = args.method_signature.split("(", 1)[0]
        pipeline = ValidationPipeline(operation, checks)
        await pipeline.run(ValidationContext(self.trading, sender))

        logger.info(
            "Submitting exchange call",
            adapter=type(self).__name__,
            operation=operation,
            sender=sender,
            exchange_index=args.exchange_index,
        )
        return await self.trading.call_on_exchange(sender, args)

