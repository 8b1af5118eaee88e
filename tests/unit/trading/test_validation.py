"""Unit tests for trading preconditions and the validation pipeline."""

import asyncio
from decimal import Decimal

import pytest

from src.melon_client.core.exceptions import (
    CooldownForMakerAssetNotReachedError,
    ExchangeNotRegisteredWithFundError,
    ExistingOpenMakeOrderError,
    FundIsShutDownError,
    OutOfBalanceError,
    SenderIsNotManagerError,
    ValidationError,
)
from src.melon_client.core.interfaces import ValidationCheck
from src.melon_client.trading.validation import (
    CooldownReached,
    ExchangeIsRegistered,
    FundIsNotShutDown,
    NoExistingOpenMakeOrder,
    SenderIsFundManager,
    SufficientBalance,
    ValidationContext,
    ValidationPipeline,
)
from tests.fixtures.funds import (
    BLOCK_TIMESTAMP,
    HUB,
    KYBER_EXCHANGE,
    MANAGER,
    MLN,
    ONE_TOKEN,
    OTHER_ACCOUNT,
    TRADING,
    VAULT,
    WETH,
)


class RecordingCheck(ValidationCheck):
    """Check stub that records its invocation and optionally fails."""

    def __init__(
        self,
        name: str,
        error: Exception | None = None,
        delay: float = 0,
        gate: asyncio.Event | None = None,
    ):
        self.name = name
        self.error = error
        self.delay = delay
        self.gate = gate
        self.invoked = False
        self.finished = False

    async def evaluate(self, context) -> None:
        self.invoked = True
        if self.gate is not None:
            await self.gate.wait()
        await asyncio.sleep(self.delay)
        self.finished = True
        if self.error is not None:
            raise self.error


@pytest.fixture
def context(trading):
    return ValidationContext(trading, MANAGER)


class TestValidationContext:
    @pytest.mark.asyncio
    async def test_resolves_fund_components(self, context):
        hub = await context.get_hub()

        assert hub.address == HUB
        assert await context.get_vault_address() == VAULT
        assert await context.get_block_timestamp() == BLOCK_TIMESTAMP


class TestSenderIsFundManager:
    @pytest.mark.asyncio
    async def test_manager_passes(self, context):
        await SenderIsFundManager().evaluate(context)

    @pytest.mark.asyncio
    async def test_other_sender_fails(self, trading):
        with pytest.raises(SenderIsNotManagerError) as exc_info:
            await SenderIsFundManager().evaluate(ValidationContext(trading, OTHER_ACCOUNT))

        assert exc_info.value.sender == OTHER_ACCOUNT
        assert exc_info.value.manager == MANAGER


class TestSufficientBalance:
    @pytest.mark.asyncio
    async def test_balance_covers_amount(self, context):
        await SufficientBalance(WETH, 1000 * ONE_TOKEN).evaluate(context)

    @pytest.mark.asyncio
    async def test_balance_too_low(self, chain, context):
        chain.respond(WETH, "balanceOf", ONE_TOKEN)

        with pytest.raises(OutOfBalanceError) as exc_info:
            await SufficientBalance(WETH, 2 * ONE_TOKEN).evaluate(context)

        assert exc_info.value.amount == Decimal(2)
        assert exc_info.value.balance == Decimal(1)

    @pytest.mark.asyncio
    async def test_balance_is_read_from_vault(self, chain, context):
        await SufficientBalance(WETH, ONE_TOKEN).evaluate(context)

        (_, _, args, _) = chain.calls_to("balanceOf")[0]
        assert args == (VAULT,)


class TestFundIsNotShutDown:
    @pytest.mark.asyncio
    async def test_active_fund_passes(self, context):
        await FundIsNotShutDown().evaluate(context)

    @pytest.mark.asyncio
    async def test_shut_down_fund_fails(self, chain, context):
        chain.respond(HUB, "isShutDown", True)

        with pytest.raises(FundIsShutDownError) as exc_info:
            await FundIsNotShutDown().evaluate(context)

        assert exc_info.value.hub == HUB


class TestNoExistingOpenMakeOrder:
    @pytest.mark.asyncio
    async def test_no_open_order_passes(self, context):
        await NoExistingOpenMakeOrder(MLN).evaluate(context)

    @pytest.mark.asyncio
    async def test_open_order_fails(self, chain, context):
        chain.respond(TRADING, "isInOpenMakeOrder", True)

        with pytest.raises(ExistingOpenMakeOrderError) as exc_info:
            await NoExistingOpenMakeOrder(MLN).evaluate(context)

        assert exc_info.value.asset == MLN


class TestCooldownReached:
    @pytest.mark.asyncio
    async def test_cooldown_passed(self, chain, context):
        chain.respond(TRADING, "makerAssetCooldown", BLOCK_TIMESTAMP)
        await CooldownReached(MLN).evaluate(context)

    @pytest.mark.asyncio
    async def test_cooldown_not_reached(self, chain, context):
        chain.respond(TRADING, "makerAssetCooldown", BLOCK_TIMESTAMP + 60)

        with pytest.raises(CooldownForMakerAssetNotReachedError) as exc_info:
            await CooldownReached(MLN).evaluate(context)

        assert exc_info.value.cooldown_end == BLOCK_TIMESTAMP + 60


class TestExchangeIsRegistered:
    @pytest.mark.asyncio
    async def test_registered_exchange_passes(self, context):
        await ExchangeIsRegistered(KYBER_EXCHANGE).evaluate(context)

    @pytest.mark.asyncio
    async def test_unregistered_exchange_fails(self, context):
        with pytest.raises(ExchangeNotRegisteredWithFundError):
            await ExchangeIsRegistered(OTHER_ACCOUNT).evaluate(context)


class TestValidationPipeline:
    """Test concurrent evaluation of checklists."""

    @pytest.mark.asyncio
    async def test_all_checks_pass(self, context):
        checks = [RecordingCheck(f"check-{i}") for i in range(3)]

        await ValidationPipeline("makeOrder", checks).run(context)

        assert all(check.invoked and check.finished for check in checks)

    @pytest.mark.asyncio
    async def test_every_check_runs_when_one_fails_early(self, context):
        """A fast failure must not prevent slower checks from being invoked and awaited."""
        checks = [
            RecordingCheck("balance", error=OutOfBalanceError(Decimal(2), Decimal(1))),
            RecordingCheck("shutdown", delay=0.01),
            RecordingCheck("manager", delay=0.01),
            RecordingCheck("open-order", delay=0.02),
            RecordingCheck("cooldown", delay=0.02),
        ]

        with pytest.raises(OutOfBalanceError):
            await ValidationPipeline("makeOrder", checks).run(context)

        assert all(check.invoked for check in checks)
        assert all(check.finished for check in checks)

    @pytest.mark.asyncio
    async def test_checks_run_concurrently(self, context):
        """All checks start before the first one finishes."""
        gate = asyncio.Event()
        checks = [RecordingCheck(f"check-{i}", gate=gate) for i in range(5)]
        pipeline = ValidationPipeline("makeOrder", checks)

        task = asyncio.ensure_future(pipeline.run(context))
        for _ in range(5):
            await asyncio.sleep(0)

        assert all(check.invoked for check in checks)
        assert not any(check.finished for check in checks)

        gate.set()
        await task
        assert all(check.finished for check in checks)

    @pytest.mark.asyncio
    async def test_first_failure_in_checklist_order_wins(self, context):
        """When several checks fail, the earliest listed one is raised, not the fastest."""
        slow_error = SenderIsNotManagerError(OTHER_ACCOUNT, MANAGER)
        fast_error = FundIsShutDownError(HUB)
        checks = [
            RecordingCheck("manager", error=slow_error, delay=0.02),
            RecordingCheck("shutdown", error=fast_error),
        ]

        with pytest.raises(ValidationError) as exc_info:
            await ValidationPipeline("takeOrder", checks).run(context)

        assert exc_info.value is slow_error

    @pytest.mark.asyncio
    async def test_real_checks_against_healthy_fund(self, context):
        checks = [
            SufficientBalance(MLN, ONE_TOKEN),
            FundIsNotShutDown(),
            SenderIsFundManager(),
            NoExistingOpenMakeOrder(MLN),
            CooldownReached(MLN),
        ]

        await ValidationPipeline("makeOrder", checks).run(context)

    @pytest.mark.asyncio
    async def test_shared_reads_hit_node_once(self, chain, context):
        """Checks reading the same fund state share one request through the cache."""
        await ValidationPipeline("makeOrder", [SenderIsFundManager(), FundIsNotShutDown()]).run(
            context
        )

        assert len(chain.calls_to("hub")) == 1
