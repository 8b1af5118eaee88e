"""0x v2 order book trading adapter."""

import secrets
from typing import Any

from src.melon_client.config.constants import (
    ORDER_IDENTIFIER_BYTES,
    ZERO_ADDRESS,
    ZERO_BYTES32,
)
from src.melon_client.contracts.trading import Trading
from src.melon_client.core.enums import ExchangeMethod
from src.melon_client.core.exceptions import InvalidOrderSignatureError
from src.melon_client.core.interfaces import OrderSigner
from src.melon_client.models.exchange import CallOnExchangeArgs
from src.melon_client.models.order import ZeroExOrder
from src.melon_client.signing.signer import (
    JsonRpcOrderSigner,
    JsonRpcShim,
    LocalAccountOrderSigner,
)
from src.melon_client.trading.adapters.base import (
    BaseTradingAdapter,
    method_signature,
    order_identifier,
)
from src.melon_client.utils.address import same_address
from src.melon_client.utils.asset_data import decode_erc20_asset_data, encode_erc20_asset_data
from src.melon_client.utils.logger import get_logger
from src.melon_client.utils.order_hash import get_order_hash

logger = get_logger(__name__)


class ZeroExTradingAdapter(BaseTradingAdapter):
    """Trades on a 0x v2 exchange with signed off-chain orders."""

    def __init__(
        self,
        trading: Trading,
        exchange: str,
        order_signer: OrderSigner | None = None,
        default_order_duration: int | None = None,
    ):
        """Initialize adapter.

        Args:
            trading: The fund's trading contract
            exchange: 0x exchange contract address
            order_signer: Signing primitive (default: chosen per signer, see get_order_signer)
            default_order_duration: Lifetime of created orders in seconds
                (default: the environment's default_order_duration)
        """
        super().__init__(trading, exchange)
        self.order_signer = order_signer
        self.default_order_duration = default_order_duration

    def get_order_hash(self, order: ZeroExOrder) -> str:
        return get_order_hash(order)

    def _order_args(
        self,
        exchange_index: int,
        method: ExchangeMethod,
        order: ZeroExOrder,
        fill_amount: int,
        identifier: str,
    ) -> CallOnExchangeArgs:
        maker_token = decode_erc20_asset_data(order.maker_asset_data)
        taker_token = decode_erc20_asset_data(order.taker_asset_data)

        return CallOnExchangeArgs(
            exchange_index=exchange_index,
            method_signature=method_signature(method),
            order_addresses=[
                order.maker_address,
                ZERO_ADDRESS,
                maker_token,
                taker_token,
                order.fee_recipient_address,
                ZERO_ADDRESS,
            ],
            order_values=[
                order.maker_asset_amount,
                order.taker_asset_amount,
                order.maker_fee,
                order.taker_fee,
                order.expiration_time_seconds,
                order.salt,
                fill_amount,
                0,
            ],
            identifier=identifier,
            maker_asset_data=order.maker_asset_data,
            taker_asset_data=order.taker_asset_data,
            signature=order.signature,
        )

    async def take_order(
        self,
        sender: str,
        order: ZeroExOrder,
        taker_amount: int | None = None,
    ) -> dict[str, Any]:
        """Take an order on 0x.

        Args:
            sender: The address of the sender
            order: The signed order to fill
            taker_amount: The amount to fill (overriding the taker asset amount of the order)
        """
        if not order.signature:
            raise InvalidOrderSignatureError()

        exchange_index = await self.get_exchange_index()
        amount = taker_amount if taker_amount is not None else order.taker_asset_amount
        args = self._order_args(
            exchange_index, ExchangeMethod.TAKE_ORDER, order, amount, ZERO_BYTES32
        )

        taker_token = args.order_addresses[3]
        return await self.submit(sender, args, self.take_order_checks(taker_token, amount))

    async def make_order(self, sender: str, order: ZeroExOrder) -> dict[str, Any]:
        """Create a make order on 0x.

        Args:
            sender: The address of the sender
            order: The signed order, with the fund as maker
        """
        if not order.signature:
            raise InvalidOrderSignatureError()

        exchange_index = await self.get_exchange_index()
        identifier = "0x" + secrets.token_hex(ORDER_IDENTIFIER_BYTES)
        args = self._order_args(exchange_index, ExchangeMethod.MAKE_ORDER, order, 0, identifier)

        maker_token = args.order_addresses[2]
        return await self.submit(
            sender, args, self.make_order_checks(maker_token, order.maker_asset_amount)
        )

    async def cancel_order(
        self,
        sender: str,
        order_hash_hex: str | None = None,
        order_id: int | None = None,
    ) -> dict[str, Any]:
        """Cancel a make order on 0x.

        Args:
            sender: The address of the sender
            order_hash_hex: Hash of the order
            order_id: Numeric order id (used when no hash is given)

        Raises:
            MissingOrderIdentifierError: If neither identifier is given
        """
        identifier = order_identifier(order_hash_hex, order_id)
        exchange_index = await self.get_exchange_index()

        args = CallOnExchangeArgs(
            exchange_index=exchange_index,
            method_signature=method_signature(ExchangeMethod.CANCEL_ORDER),
            identifier=identifier,
        )
        return await self.submit(sender, args, self.cancel_order_checks())

    async def create_unsigned_order(
        self,
        maker_token_address: str,
        taker_token_address: str,
        maker_asset_amount: int,
        taker_asset_amount: int,
        taker_fee: int | None = None,
        fee_recipient_address: str | None = None,
        duration: int | None = None,
    ) -> ZeroExOrder:
        """Build an order with the fund as maker.

        The order expires `duration` seconds after the timestamp of the latest
        block. Without a duration, the adapter's and then the environment's
        default applies.
        """
        if duration is None:
            duration = self.default_order_duration or self.environment.default_order_duration
        timestamp = await self.environment.get_block_timestamp("latest")

        return ZeroExOrder(
            exchange_address=self.exchange,
            maker_address=self.trading.address,
            taker_address=ZERO_ADDRESS,
            sender_address=ZERO_ADDRESS,
            fee_recipient_address=fee_recipient_address or ZERO_ADDRESS,
            expiration_time_seconds=timestamp + duration,
            salt=secrets.randbits(256),
            maker_asset_amount=maker_asset_amount,
            taker_asset_amount=taker_asset_amount,
            maker_asset_data=encode_erc20_asset_data(maker_token_address),
            taker_asset_data=encode_erc20_asset_data(taker_token_address),
            maker_fee=0,
            taker_fee=taker_fee or 0,
        )

    def get_order_signer(self, signer: str) -> OrderSigner:
        """Signing primitive for a signer address.

        The injected signer wins; otherwise the environment's local account
        signs for its own address and the node signs (eth_sign) for any other.
        """
        if self.order_signer is not None:
            return self.order_signer
        if self.environment.signs_for(signer):
            return LocalAccountOrderSigner(self.environment.account)
        return JsonRpcOrderSigner(JsonRpcShim(self.environment.client.provider))

    async def sign_order(self, order: ZeroExOrder, signer: str) -> ZeroExOrder:
        """Sign an order.

        When the signer is not the maker (the maker is the fund's trading
        contract, which cannot sign), the signature is marked pre-signed so
        the exchange defers to the maker's on-chain approval.

        Args:
            order: Unsigned order
            signer: Address of the signing account

        Returns:
            ZeroExOrder: A signed copy of the order
        """
        signed = order.model_copy(deep=True)
        signature = await self.get_order_signer(signer).sign_order(signed, signer)
        signed.attach_signature(signature)

        if not same_address(signed.maker_address, signer):
            logger.info(
                "Signer is not the order maker, marking signature as pre-signed",
                maker=signed.maker_address,
                signer=signer,
            )
            signed.mark_pre_signed()

        return signed
