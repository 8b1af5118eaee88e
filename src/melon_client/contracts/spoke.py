"""Fund spoke contract: a component registered with a hub."""

from enum import Enum

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import SPOKE_ABI
from src.melon_client.models.exchange import Routes


class SpokeMethod(str, Enum):
    HUB = "hub"
    ROUTES = "routes"


class Spoke(Contract):
    abi = SPOKE_ABI
    methods = SpokeMethod

    async def get_hub(self, block: int | None = None) -> str:
        """Gets the address of the fund's hub."""
        return await self.make_call(SpokeMethod.HUB, None, block)

    async def get_routes(self, block: int | None = None) -> Routes:
        """Gets the addresses of all fund components."""
        (
            accounting,
            fee_manager,
            participation,
            policy_manager,
            shares,
            trading,
            vault,
            price_source,
            registry,
            version,
            engine,
            mln_token,
        ) = await self.make_call(SpokeMethod.ROUTES, None, block)

        return Routes(
            accounting=accounting,
            fee_manager=fee_manager,
            participation=participation,
            policy_manager=policy_manager,
            shares=shares,
            trading=trading,
            vault=vault,
            price_source=price_source,
            registry=registry,
            version=version,
            engine=engine,
            mln_token=mln_token,
        )
