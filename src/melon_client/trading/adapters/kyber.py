"""Kyber network trading adapter."""

from typing import Any

from pydantic import BaseModel, Field

from src.melon_client.config.constants import ZERO_ADDRESS
from src.melon_client.core.enums import ExchangeMethod
from src.melon_client.models.exchange import CallOnExchangeArgs
from src.melon_client.trading.adapters.base import BaseTradingAdapter, method_signature


class TakeOrderKyber(BaseModel):
    """Swap on Kyber at the network's current rate."""

    kyber_address: str = Field(..., description="Kyber network proxy address")
    maker_asset: str = Field(..., description="Asset the fund receives")
    taker_asset: str = Field(..., description="Asset the fund pays")
    maker_quantity: int = Field(..., description="Expected amount received", ge=0)
    taker_quantity: int = Field(..., description="Amount paid", gt=0)


class KyberTradingAdapter(BaseTradingAdapter):
    """Kyber takes no resting orders: the only operation is a swap (take order)."""

    async def take_order(
        self,
        sender: str,
        order: TakeOrderKyber,
        taker_amount: int | None = None,
    ) -> dict[str, Any]:
        """Take order on Kyber.

        Args:
            sender: The address of the sender
            order: The swap to perform
            taker_amount: The amount paid (overriding the taker quantity of the order)
        """
        exchange_index = await self.get_exchange_index(order.kyber_address)
        amount = taker_amount if taker_amount is not None else order.taker_quantity

        args = CallOnExchangeArgs(
            exchange_index=exchange_index,
            method_signature=method_signature(ExchangeMethod.TAKE_ORDER),
            order_addresses=[
                ZERO_ADDRESS,
                ZERO_ADDRESS,
                order.maker_asset,
                order.taker_asset,
                ZERO_ADDRESS,
                ZERO_ADDRESS,
            ],
            order_values=[
                order.maker_quantity,
                order.taker_quantity,
                0,
                0,
                0,
                0,
                amount,
                0,
            ],
        )

        return await self.submit(sender, args, self.take_order_checks(order.taker_asset, amount))
