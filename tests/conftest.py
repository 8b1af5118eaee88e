"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest
from eth_account import Account

from src.melon_client.api.cache import InMemoryCallCache
from src.melon_client.api.environment import Environment
from src.melon_client.contracts.trading import Trading
from tests.fixtures.funds import (
    EXCHANGE_INFO,
    HUB,
    MANAGER,
    MLN,
    ONE_TOKEN,
    ROUTES,
    TEST_PRIVATE_KEY,
    TRADING,
    WETH,
)
from tests.mocks.chain import MockChain

# ===== Pytest Markers =====


def pytest_configure(config: Any) -> None:
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")


# ===== Chain Fixtures =====


@pytest.fixture
def chain() -> MockChain:
    """Fake chain with a healthy fund: manager set, not shut down, funded vault."""
    chain = MockChain()

    chain.respond(TRADING, "hub", HUB)
    chain.respond(TRADING, "routes", ROUTES)
    chain.respond(TRADING, "getExchangeInfo", EXCHANGE_INFO)
    chain.respond(TRADING, "isInOpenMakeOrder", False)
    chain.respond(TRADING, "makerAssetCooldown", 0)

    chain.respond(HUB, "manager", MANAGER)
    chain.respond(HUB, "isShutDown", False)

    chain.respond(WETH, "balanceOf", 1000 * ONE_TOKEN)
    chain.respond(MLN, "balanceOf", 1000 * ONE_TOKEN)
    return chain


@pytest.fixture
def environment(chain: MockChain) -> Environment:
    """Environment over the fake chain with call caching enabled."""
    return Environment(client=chain, cache=InMemoryCallCache())


@pytest.fixture
def uncached_environment(chain: MockChain) -> Environment:
    """Environment over the fake chain without call caching."""
    return Environment(client=chain, cache=None)


@pytest.fixture
def local_account():
    """Local signing account."""
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture
def trading(environment: Environment) -> Trading:
    """The fund's trading contract."""
    return Trading(environment, TRADING)
