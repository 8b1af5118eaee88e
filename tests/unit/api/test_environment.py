"""Unit tests for the session environment."""

import pytest
from web3 import AsyncWeb3

from src.melon_client.api.cache import InMemoryCallCache
from src.melon_client.api.environment import Environment
from src.melon_client.config.constants import DEFAULT_ORDER_DURATION_SECONDS
from src.melon_client.config.settings import Settings
from tests.fixtures.funds import BLOCK_TIMESTAMP, OTHER_ACCOUNT, TEST_PRIVATE_KEY


class TestEnvironmentFromSettings:
    """Test building an environment from settings."""

    def test_builds_async_client_and_cache(self):
        settings = Settings(rpc_url="http://localhost:8545")

        environment = Environment.from_settings(settings)

        assert isinstance(environment.client, AsyncWeb3)
        assert isinstance(environment.cache, InMemoryCallCache)
        assert environment.account is None

    def test_cache_can_be_disabled(self):
        settings = Settings(rpc_url="http://localhost:8545", cache_enabled=False)

        environment = Environment.from_settings(settings)

        assert environment.cache is None

    def test_loads_local_account(self):
        settings = Settings(rpc_url="http://localhost:8545", private_key=TEST_PRIVATE_KEY)

        environment = Environment.from_settings(settings)

        assert environment.account is not None
        assert environment.account.address == settings.account_address

    def test_transaction_timeout_from_settings(self):
        settings = Settings(rpc_url="http://localhost:8545", transaction_timeout_seconds=60)
        assert Environment.from_settings(settings).transaction_timeout == 60

    def test_order_duration_from_settings(self):
        settings = Settings(rpc_url="http://localhost:8545", default_order_duration_seconds=3600)
        assert Environment.from_settings(settings).default_order_duration == 3600

    def test_default_order_duration(self, chain):
        assert Environment(client=chain).default_order_duration == DEFAULT_ORDER_DURATION_SECONDS


class TestEnvironment:
    """Test environment helpers."""

    def test_signs_for_local_account_only(self, chain, local_account):
        environment = Environment(client=chain, account=local_account)

        assert environment.signs_for(local_account.address) is True
        assert environment.signs_for(local_account.address.lower()) is True
        assert environment.signs_for(OTHER_ACCOUNT) is False

    def test_signs_for_without_account(self, chain):
        assert Environment(client=chain).signs_for(OTHER_ACCOUNT) is False

    @pytest.mark.asyncio
    async def test_get_block_timestamp(self, chain, environment):
        timestamp = await environment.get_block_timestamp()

        assert timestamp == BLOCK_TIMESTAMP
        chain.eth.get_block.assert_awaited_once_with("latest")
