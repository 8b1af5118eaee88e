"""OasisDex matching market contract."""

from enum import Enum

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import MATCHING_MARKET_ABI
from src.melon_client.models.exchange import MatchingMarketOffer


class MatchingMarketMethod(str, Enum):
    GET_OFFER = "getOffer"
    GET_OWNER = "getOwner"


class MatchingMarket(Contract):
    abi = MATCHING_MARKET_ABI
    methods = MatchingMarketMethod

    async def get_offer(self, offer_id: int, block: int | None = None) -> MatchingMarketOffer:
        """Gets an offer and its owner.

        Args:
            offer_id: Offer id on the market
            block: The block number to execute the call on.
        """
        pay_amount, pay_token, buy_amount, buy_token = await self.make_call(
            MatchingMarketMethod.GET_OFFER, [offer_id], block
        )
        owner = await self.make_call(MatchingMarketMethod.GET_OWNER, [offer_id], block)

        return MatchingMarketOffer(
            id=offer_id,
            owner=owner,
            pay_amount=pay_amount,
            pay_token=pay_token,
            buy_amount=buy_amount,
            buy_token=buy_token,
        )
