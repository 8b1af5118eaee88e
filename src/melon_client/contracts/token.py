"""ERC20 token contract."""

from decimal import Decimal
from enum import Enum

from web3 import Web3

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import ERC20_ABI
from src.melon_client.utils.address import to_checksum


class TokenMethod(str, Enum):
    BALANCE_OF = "balanceOf"
    DECIMALS = "decimals"
    SYMBOL = "symbol"


class Token(Contract):
    """ERC20 token."""

    abi = ERC20_ABI
    methods = TokenMethod

    async def balance_of(self, who: str, block: int | None = None) -> Decimal:
        """Gets the balance of an address in whole tokens (18 decimals).

        Args:
            who: Address of the holder
            block: The block number to execute the call on
        """
        result = await self.make_call(TokenMethod.BALANCE_OF, [to_checksum(who)], block)
        return Decimal(Web3.from_wei(result, "ether"))

    async def get_decimals(self, block: int | None = None) -> int:
        return int(await self.make_call(TokenMethod.DECIMALS, None, block))

    async def get_symbol(self, block: int | None = None) -> str:
        return await self.make_call(TokenMethod.SYMBOL, None, block)
