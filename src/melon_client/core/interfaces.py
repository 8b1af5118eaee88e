"""Core interfaces for the Melon fund client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.melon_client.models.order import ZeroExOrder
    from src.melon_client.trading.validation import ValidationContext


class CallCache(ABC):
    """Interface for memoizing read-only contract calls."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether a call is cached.

        Args:
            key: Cache key built by make_cache_key

        Returns:
            bool: True if an entry exists for the key
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Awaitable[Any] | None:
        """Get the pending or resolved call stored under a key.

        Args:
            key: Cache key built by make_cache_key

        Returns:
            Awaitable[Any] | None: The stored future, or None if absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Awaitable[Any]) -> None:
        """Store a pending or resolved call.

        Args:
            key: Cache key built by make_cache_key
            value: Future of the contract call
        """
        pass


class ValidationCheck(ABC):
    """Interface for a precondition of a state-changing call."""

    @abstractmethod
    async def evaluate(self, context: ValidationContext) -> None:
        """Evaluate the check.

        Args:
            context: Validation context of the operation

        Raises:
            ValidationError: A specific subtype if the check fails
        """
        pass


class OrderSigner(ABC):
    """Interface for signing primitives of off-chain orders."""

    @abstractmethod
    async def sign_order(self, order: ZeroExOrder, signer: str) -> str:
        """Sign an order.

        Args:
            order: Order to sign
            signer: Address of the signing account

        Returns:
            str: Hex signature blob in 0x layout (v, r, s, signature type)
        """
        pass
