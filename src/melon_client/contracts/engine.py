"""Engine contract: protocol-wide amgu and ether accounting."""

from decimal import Decimal
from enum import Enum

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import ENGINE_ABI


class EngineMethod(str, Enum):
    AMGU_PRICE = "amguPrice"
    ENGINE_PRICE = "enginePrice"
    FROZEN_ETHER = "frozenEther"
    LIQUID_ETHER = "liquidEther"
    PREMIUM_PERCENT = "premiumPercent"
    REGISTRY = "registry"
    TOTAL_ETHER_CONSUMED = "totalEtherConsumed"
    TOTAL_AMGU_CONSUMED = "totalAmguConsumed"
    TOTAL_MLN_BURNED = "totalMlnBurned"


class Engine(Contract):
    """Engine contract."""

    abi = ENGINE_ABI
    methods = EngineMethod

    async def _get_number(self, method: EngineMethod, block: int | None) -> Decimal:
        return Decimal(await self.make_call(method, None, block))

    async def get_amgu_price(self, block: int | None = None) -> Decimal:
        """Gets the amgu price.

        Args:
            block: The block number to execute the call on.
        """
        return await self._get_number(EngineMethod.AMGU_PRICE, block)

    async def get_engine_price(self, block: int | None = None) -> Decimal:
        """Gets the current engine price.

        Args:
            block: The block number to execute the call on.
        """
        return await self._get_number(EngineMethod.ENGINE_PRICE, block)

    async def get_frozen_ether(self, block: int | None = None) -> Decimal:
        """Gets the frozen ether.

        Args:
            block: The block number to execute the call on.
        """
        return await self._get_number(EngineMethod.FROZEN_ETHER, block)

    async def get_liquid_ether(self, block: int | None = None) -> Decimal:
        """Gets the liquid ether.

        Args:
            block: The block number to execute the call on.
        """
        return await self._get_number(EngineMethod.LIQUID_ETHER, block)

    async def get_premium_percent(self, block: int | None = None) -> Decimal:
        """Gets the percentage premium.

        Args:
            block: The block number to execute the call on.
        """
        return await self._get_number(EngineMethod.PREMIUM_PERCENT, block)

    async def get_registry(self, block: int | None = None) -> str:
        """Gets the address of the registry.

        Args:
            block: The block number to execute the call on.
        """
        return await self.make_call(EngineMethod.REGISTRY, None, block)

    async def get_total_ether_consumed(self, block: int | None = None) -> Decimal:
        return await self._get_number(EngineMethod.TOTAL_ETHER_CONSUMED, block)

    async def get_total_amgu_consumed(self, block: int | None = None) -> Decimal:
        return await self._get_number(EngineMethod.TOTAL_AMGU_CONSUMED, block)

    async def get_total_mln_burned(self, block: int | None = None) -> Decimal:
        return await self._get_number(EngineMethod.TOTAL_MLN_BURNED, block)
