"""Session environment shared by all contract wrappers."""

import asyncio

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3

from src.melon_client.api.cache import InMemoryCallCache
from src.melon_client.config.constants import (
    DEFAULT_ORDER_DURATION_SECONDS,
    TRANSACTION_TIMEOUT_SECONDS,
)
from src.melon_client.config.settings import Settings
from src.melon_client.core.exceptions import ConfigurationError
from src.melon_client.core.interfaces import CallCache
from src.melon_client.utils.address import same_address
from src.melon_client.utils.logger import get_logger

logger = get_logger(__name__)


class Environment:
    """Bundles the network client, the call cache and the signing context."""

    def __init__(
        self,
        client: AsyncWeb3,
        cache: CallCache | None = None,
        account: LocalAccount | None = None,
        transaction_timeout: int = TRANSACTION_TIMEOUT_SECONDS,
        default_order_duration: int = DEFAULT_ORDER_DURATION_SECONDS,
    ):
        """Initialize environment.

        Args:
            client: Async Web3 client
            cache: Call cache (None disables memoization of reads)
            account: Local account used to sign transactions (None = node-managed accounts)
            transaction_timeout: Seconds to wait for transaction receipts
            default_order_duration: Lifetime in seconds of 0x orders built without a duration
        """
        self.client = client
        self.cache = cache
        self.account = account
        self.transaction_timeout = transaction_timeout
        self.default_order_duration = default_order_duration

        # Serializes nonce fetching and submission of locally signed transactions
        self.nonce_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Environment":
        """Build an environment from client settings.

        Raises:
            ConfigurationError: If the private key cannot be loaded
        """
        account = None
        if settings.private_key:
            try:
                account = Account.from_key(settings.private_key)
            except Exception as e:
                raise ConfigurationError(f"Invalid private key: {e}") from e

        logger.debug(
            "Creating environment",
            rpc_url=settings.rpc_url,
            cache_enabled=settings.cache_enabled,
            account=settings.account_address,
        )

        return cls(
            client=AsyncWeb3(AsyncHTTPProvider(settings.rpc_url)),
            cache=InMemoryCallCache() if settings.cache_enabled else None,
            account=account,
            transaction_timeout=settings.transaction_timeout_seconds,
            default_order_duration=settings.default_order_duration_seconds,
        )

    def signs_for(self, address: str) -> bool:
        """Check if the local account signs transactions for an address."""
        return self.account is not None and same_address(self.account.address, address)

    async def get_block_timestamp(self, block: int | str = "latest") -> int:
        """Get the timestamp of a block.

        Args:
            block: Block number or tag

        Returns:
            int: Unix timestamp of the block
        """
        result = await self.client.eth.get_block(block)
        return int(result["timestamp"])
