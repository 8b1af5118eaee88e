"""OasisDex matching market trading adapter."""

from typing import Any

from pydantic import BaseModel, Field

from src.melon_client.config.constants import ZERO_ADDRESS
from src.melon_client.contracts.matching_market import MatchingMarket
from src.melon_client.core.enums import ExchangeMethod
from src.melon_client.models.exchange import CallOnExchangeArgs, MatchingMarketOffer
from src.melon_client.trading.adapters.base import (
    BaseTradingAdapter,
    method_signature,
    order_identifier,
)


class MakeOrderOasisDex(BaseModel):
    """An offer the fund places on the matching market."""

    maker_asset: str = Field(..., description="Asset the fund sells")
    taker_asset: str = Field(..., description="Asset the fund buys")
    maker_quantity: int = Field(..., description="Amount sold", gt=0)
    taker_quantity: int = Field(..., description="Amount bought", gt=0)


class OasisDexTradingAdapter(BaseTradingAdapter):
    """Trades against on-chain offers of an OasisDex matching market."""

    @property
    def market(self) -> MatchingMarket:
        return MatchingMarket(self.environment, self.exchange)

    @staticmethod
    def _offer_addresses(offer: MatchingMarketOffer) -> list[str]:
        return [
            offer.owner,
            ZERO_ADDRESS,
            offer.pay_token,
            offer.buy_token,
            ZERO_ADDRESS,
            ZERO_ADDRESS,
        ]

    async def take_order(
        self,
        sender: str,
        offer_id: int,
        taker_amount: int | None = None,
    ) -> dict[str, Any]:
        """Take an offer on the matching market.

        Args:
            sender: The address of the sender
            offer_id: Id of the offer on the market
            taker_amount: The amount of the offer's buy token to pay (default: all of it)
        """
        exchange_index = await self.get_exchange_index()
        offer = await self.market.get_offer(offer_id)
        amount = taker_amount if taker_amount is not None else offer.buy_amount

        args = CallOnExchangeArgs(
            exchange_index=exchange_index,
            method_signature=method_signature(ExchangeMethod.TAKE_ORDER),
            order_addresses=self._offer_addresses(offer),
            order_values=[offer.pay_amount, offer.buy_amount, 0, 0, 0, 0, amount, 0],
            identifier=order_identifier(order_id=offer_id),
        )
        return await self.submit(sender, args, self.take_order_checks(offer.buy_token, amount))

    async def make_order(self, sender: str, order: MakeOrderOasisDex) -> dict[str, Any]:
        """Place an offer on the matching market.

        Args:
            sender: The address of the sender
            order: The offer to place
        """
        exchange_index = await self.get_exchange_index()

        args = CallOnExchangeArgs(
            exchange_index=exchange_index,
            method_signature=method_signature(ExchangeMethod.MAKE_ORDER),
            order_addresses=[
                self.trading.address,
                ZERO_ADDRESS,
                order.maker_asset,
                order.taker_asset,
                ZERO_ADDRESS,
                ZERO_ADDRESS,
            ],
            order_values=[order.maker_quantity, order.taker_quantity, 0, 0, 0, 0, 0, 0],
        )
        return await self.submit(
            sender, args, self.make_order_checks(order.maker_asset, order.maker_quantity)
        )

    async def cancel_order(
        self,
        sender: str,
        order_hash_hex: str | None = None,
        order_id: int | None = None,
    ) -> dict[str, Any]:
        """Cancel an offer of the fund.

        Raises:
            MissingOrderIdentifierError: If neither identifier is given
        """
        identifier = order_identifier(order_hash_hex, order_id)
        exchange_index = await self.get_exchange_index()
        offer = await self.market.get_offer(int(identifier, 16))

        args = CallOnExchangeArgs(
            exchange_index=exchange_index,
            method_signature=method_signature(ExchangeMethod.CANCEL_ORDER),
            order_addresses=self._offer_addresses(offer),
            identifier=identifier,
        )
        return await self.submit(sender, args, self.cancel_order_checks())
