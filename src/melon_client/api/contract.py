"""Contract call and transaction dispatch."""

import asyncio
from enum import Enum
from typing import Any, ClassVar

from web3 import Web3

from src.melon_client.api.cache import make_cache_key
from src.melon_client.api.environment import Environment
from src.melon_client.config.abis import function_selector, function_signatures
from src.melon_client.core.exceptions import TransactionFailedError, UnknownContractMethodError
from src.melon_client.utils.address import to_checksum
from src.melon_client.utils.logger import get_logger

logger = get_logger(__name__)


class Contract:
    """Base class of typed contract wrappers.

    Subclasses declare their ABI and an enum of the methods they use. The enum
    is checked against the ABI when the subclass is defined, and the ABI is
    resolved into a static name -> signature table.

    Reads go through make_call, which memoizes the in-flight call in the
    environment's cache. Writes go through send_transaction and are never
    cached.
    """

    abi: ClassVar[list[dict[str, Any]]] = []
    methods: ClassVar[type[Enum] | None] = None
    signatures: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.signatures = function_signatures(cls.abi)
        if cls.methods is not None:
            for member in cls.methods:
                if member.value not in cls.signatures:
                    raise UnknownContractMethodError(cls.__name__, member.value)

    def __init__(self, environment: Environment, address: str):
        """Initialize contract wrapper.

        Args:
            environment: Session environment
            address: Contract address

        Raises:
            ValueError: If address is invalid
        """
        self.environment = environment
        self.address = to_checksum(address)
        self.contract = environment.client.eth.contract(address=self.address, abi=self.abi)

    def _resolve(self, method: Enum | str) -> str:
        name = method.value if isinstance(method, Enum) else method
        if name not in self.signatures:
            raise UnknownContractMethodError(type(self).__name__, name)
        return name

    def signature_of(self, method: Enum | str) -> str:
        """Canonical signature of a method, e.g. "balanceOf(address)"."""
        return self.signatures[self._resolve(method)]

    def selector_of(self, method: Enum | str) -> str:
        """4-byte selector of a method."""
        return function_selector(self.signature_of(method))

    def make_call(
        self,
        method: Enum | str,
        args: list[Any] | None = None,
        block: int | None = None,
    ) -> asyncio.Future:
        """Dispatch a read-only contract call.

        With a cache, identical (block, method, args) calls return the very
        same future, so at most one request per key reaches the node. The
        future is stored before it resolves. Errors from the node propagate
        unmodified.

        Args:
            method: Contract method
            args: Call arguments
            block: Block number to execute the call on (None = latest)

        Returns:
            asyncio.Future: Pending or resolved call result
        """
        name = self._resolve(method)
        cache = self.environment.cache

        key = None
        if cache is not None:
            key = make_cache_key(block, name, args, contract=self.address)
            if cache.has(key):
                logger.debug("contract_call_cache_hit", contract=self.address, method=name)
                return cache.get(key)

        function = getattr(self.contract.functions, name)
        future = asyncio.ensure_future(function(*(args or [])).call(block_identifier=block))

        if cache is not None:
            cache.set(key, future)
            logger.debug("contract_call_cached", contract=self.address, method=name, block=block)

        return future

    def encode_call(self, method: Enum | str, args: list[Any] | None = None) -> str:
        """Encode calldata for a contract method.

        Returns:
            str: Hex calldata (selector followed by encoded arguments)
        """
        name = self._resolve(method)
        function = getattr(self.contract.functions, name)
        return function(*(args or []))._encode_transaction_data()

    async def send_transaction(
        self,
        sender: str,
        method: Enum | str,
        args: list[Any] | None = None,
    ) -> dict[str, Any]:
        """Submit a state-changing call and wait for its receipt.

        Transactions from the environment's local account are built, signed
        and sent raw; any other sender must be unlocked on the node.

        Args:
            sender: Address of the sender
            method: Contract method
            args: Call arguments

        Returns:
            dict[str, Any]: Transaction receipt

        Raises:
            TransactionFailedError: If the mined transaction reverted
        """
        name = self._resolve(method)
        sender = to_checksum(sender)
        eth = self.environment.client.eth
        function = getattr(self.contract.functions, name)(*(args or []))

        if self.environment.signs_for(sender):
            account = self.environment.account
            async with self.environment.nonce_lock:
                nonce = await eth.get_transaction_count(account.address, "pending")
                tx = await function.build_transaction({"from": account.address, "nonce": nonce})
                signed_tx = account.sign_transaction(tx)
                tx_hash = await eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = await function.transact({"from": sender})

        tx_hash_hex = tx_hash if isinstance(tx_hash, str) else Web3.to_hex(tx_hash)
        logger.info(
            "Transaction submitted",
            contract=self.address,
            method=name,
            sender=sender,
            tx_hash=tx_hash_hex,
        )

        receipt = await eth.wait_for_transaction_receipt(
            tx_hash, timeout=self.environment.transaction_timeout
        )
        receipt = dict(receipt)

        if receipt.get("status") == 0:
            logger.error("Transaction reverted", tx_hash=tx_hash_hex, method=name)
            raise TransactionFailedError(tx_hash_hex)

        logger.info(
            "Transaction confirmed",
            tx_hash=tx_hash_hex,
            block_number=receipt.get("blockNumber"),
            gas_used=receipt.get("gasUsed"),
        )
        return receipt
