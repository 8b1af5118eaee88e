"""Fund trading contract: the fund's proxy towards registered exchanges."""

from enum import Enum
from typing import Any

from src.melon_client.config.abis import TRADING_ABI
from src.melon_client.contracts.spoke import Spoke
from src.melon_client.core.exceptions import ExchangeNotRegisteredWithFundError
from src.melon_client.models.exchange import CallOnExchangeArgs, ExchangeInfo, OpenMakeOrder
from src.melon_client.utils.address import same_address, to_checksum
from src.melon_client.utils.logger import get_logger

logger = get_logger(__name__)


class TradingMethod(str, Enum):
    GET_EXCHANGE_INFO = "getExchangeInfo"
    IS_IN_OPEN_MAKE_ORDER = "isInOpenMakeOrder"
    MAKER_ASSET_COOLDOWN = "makerAssetCooldown"
    OPEN_MAKE_ORDERS = "exchangesToOpenMakeOrders"
    CALL_ON_EXCHANGE = "callOnExchange"


class Trading(Spoke):
    """Trading component of a fund."""

    abi = TRADING_ABI
    methods = TradingMethod

    async def get_exchange_info(self, block: int | None = None) -> list[ExchangeInfo]:
        """Gets the exchanges registered with the fund, in registration order.

        Args:
            block: The block number to execute the call on.
        """
        exchanges, adapters, takes_custody = await self.make_call(
            TradingMethod.GET_EXCHANGE_INFO, None, block
        )

        return [
            ExchangeInfo(index=index, exchange=exchange, adapter=adapter, takes_custody=custody)
            for index, (exchange, adapter, custody) in enumerate(
                zip(exchanges, adapters, takes_custody, strict=True)
            )
        ]

    async def get_exchange_index(self, exchange: str, block: int | None = None) -> int:
        """Gets the registration index of an exchange.

        Args:
            exchange: Exchange contract address
            block: The block number to execute the call on.

        Raises:
            ExchangeNotRegisteredWithFundError: If the exchange is not registered
        """
        for info in await self.get_exchange_info(block):
            if same_address(info.exchange, exchange):
                return info.index

        raise ExchangeNotRegisteredWithFundError(exchange)

    async def is_in_open_make_order(self, asset: str, block: int | None = None) -> bool:
        """Checks whether the fund has an open make order selling the asset."""
        result = await self.make_call(
            TradingMethod.IS_IN_OPEN_MAKE_ORDER, [to_checksum(asset)], block
        )
        return bool(result)

    async def get_maker_asset_cooldown(self, asset: str, block: int | None = None) -> int:
        """Gets the timestamp after which the asset can be offered again."""
        result = await self.make_call(TradingMethod.MAKER_ASSET_COOLDOWN, [to_checksum(asset)], block)
        return int(result)

    async def get_open_make_order(
        self, exchange: str, asset: str, block: int | None = None
    ) -> OpenMakeOrder:
        """Gets the open make order of the fund for an asset on an exchange."""
        order_id, expires_at, order_index, buy_asset = await self.make_call(
            TradingMethod.OPEN_MAKE_ORDERS,
            [to_checksum(exchange), to_checksum(asset)],
            block,
        )
        return OpenMakeOrder(
            id=order_id, expires_at=expires_at, order_index=order_index, buy_asset=buy_asset
        )

    async def call_on_exchange(self, sender: str, args: CallOnExchangeArgs) -> dict[str, Any]:
        """Relay an exchange call through the fund.

        Validation of the call's preconditions is the caller's responsibility
        and must complete before this is invoked.

        Args:
            sender: Address of the sender (the fund manager)
            args: Normalized call arguments

        Returns:
            dict[str, Any]: Transaction receipt
        """
        logger.info(
            "Calling exchange through fund",
            trading=self.address,
            exchange_index=args.exchange_index,
            method_signature=args.method_signature,
            identifier=args.identifier,
        )
        return await self.send_transaction(
            sender, TradingMethod.CALL_ON_EXCHANGE, args.to_contract_args()
        )
