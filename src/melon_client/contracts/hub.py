"""Fund hub contract."""

from enum import Enum

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import HUB_ABI


class HubMethod(str, Enum):
    MANAGER = "manager"
    IS_SHUT_DOWN = "isShutDown"
    NAME = "name"


class Hub(Contract):
    """Central contract of a fund, linking its components."""

    abi = HUB_ABI
    methods = HubMethod

    async def get_manager(self, block: int | None = None) -> str:
        """Gets the address of the fund manager."""
        return await self.make_call(HubMethod.MANAGER, None, block)

    async def is_shut_down(self, block: int | None = None) -> bool:
        """Checks whether the fund has been shut down."""
        return bool(await self.make_call(HubMethod.IS_SHUT_DOWN, None, block))

    async def get_name(self, block: int | None = None) -> str:
        return await self.make_call(HubMethod.NAME, None, block)
