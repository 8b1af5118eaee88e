"""AmguConsumer contract: components that pay amgu to the engine."""

from enum import Enum

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import AMGU_CONSUMER_ABI


class AmguConsumerMethod(str, Enum):
    MLN_TOKEN = "mlnToken"
    ENGINE = "engine"
    PRICE_SOURCE = "priceSource"
    VERSION = "version"


class AmguConsumer(Contract):
    abi = AMGU_CONSUMER_ABI
    methods = AmguConsumerMethod

    async def get_amgu_token(self, block: int | None = None) -> str:
        return await self.make_call(AmguConsumerMethod.MLN_TOKEN, None, block)

    async def get_engine(self, block: int | None = None) -> str:
        return await self.make_call(AmguConsumerMethod.ENGINE, None, block)

    async def get_price_source(self, block: int | None = None) -> str:
        return await self.make_call(AmguConsumerMethod.PRICE_SOURCE, None, block)

    async def get_version(self, block: int | None = None) -> str:
        return await self.make_call(AmguConsumerMethod.VERSION, None, block)
