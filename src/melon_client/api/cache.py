"""Read-through memoization of contract calls."""

import hashlib
import json
from collections.abc import Awaitable
from typing import Any

from src.melon_client.config.constants import LATEST_BLOCK
from src.melon_client.core.interfaces import CallCache


def make_cache_key(
    block: int | None,
    method: str,
    args: list[Any] | None = None,
    contract: str | None = None,
) -> str:
    """Build the cache key of a contract call.

    The key is content based: the block reference (or the latest-block
    sentinel), the method name qualified by the contract address and an md5
    digest of the JSON-serialized argument list.

    Args:
        block: Block number, or None for the latest block
        method: Contract method name
        args: Call arguments
        contract: Address of the called contract

    Returns:
        str: Cache key, e.g. "latest:0xab..:balanceOf:5d41402abc4b2a76b9719d911017c592"
    """
    block_ref = LATEST_BLOCK if block is None else str(block)
    serialized = json.dumps(args, default=str, separators=(",", ":"))
    digest = hashlib.md5(serialized.encode("utf-8")).hexdigest()
    if contract:
        method = f"{contract.lower()}:{method}"
    return f"{block_ref}:{method}:{digest}"


class InMemoryCallCache(CallCache):
    """Unbounded cache of in-flight and completed calls.

    Entries live as long as the cache and are never evicted. The stored value
    is the call's future rather than its result, so concurrent identical calls
    share a single network round-trip.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Awaitable[Any]] = {}

    def has(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Awaitable[Any] | None:
        return self._entries.get(key)

    def set(self, key: str, value: Awaitable[Any]) -> None:
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)
