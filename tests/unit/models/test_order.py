"""Tests for the 0x order model."""

import pytest
from pydantic import ValidationError

from src.melon_client.config.constants import ZERO_ADDRESS
from src.melon_client.core.enums import OrderSigningState
from src.melon_client.core.exceptions import InvalidStateTransitionError
from src.melon_client.models.order import ZeroExOrder
from src.melon_client.utils.asset_data import encode_erc20_asset_data
from tests.fixtures.funds import MLN, TRADING, WETH, ZEROEX_EXCHANGE

SIGNATURE = "0x1b" + "ab" * 32 + "cd" * 32 + "03"


@pytest.fixture
def order() -> ZeroExOrder:
    return ZeroExOrder(
        exchange_address=ZEROEX_EXCHANGE,
        maker_address=TRADING,
        expiration_time_seconds=1_700_086_400,
        salt=1,
        maker_asset_amount=100,
        taker_asset_amount=50,
        maker_asset_data=encode_erc20_asset_data(MLN),
        taker_asset_data=encode_erc20_asset_data(WETH),
    )


class TestZeroExOrderModel:
    def test_defaults(self, order):
        assert order.taker_address == ZERO_ADDRESS
        assert order.sender_address == ZERO_ADDRESS
        assert order.fee_recipient_address == ZERO_ADDRESS
        assert order.maker_fee == 0
        assert order.taker_fee == 0
        assert order.signature is None
        assert order.is_signed is False
        assert order.signing_state == OrderSigningState.BUILT

    def test_invalid_address(self):
        with pytest.raises(ValidationError):
            ZeroExOrder(
                exchange_address="0x1234",
                maker_address=TRADING,
                expiration_time_seconds=0,
                salt=0,
                maker_asset_amount=0,
                taker_asset_amount=0,
                maker_asset_data="0x",
                taker_asset_data="0x",
            )

    def test_negative_amount(self, order):
        with pytest.raises(ValidationError):
            ZeroExOrder(**{**order.model_dump(), "maker_asset_amount": -1})


class TestOrderSigningStateMachine:
    """Test signing state transitions."""

    def test_attach_signature(self, order):
        order.attach_signature(SIGNATURE)

        assert order.signature == SIGNATURE
        assert order.is_signed is True
        assert order.signing_state == OrderSigningState.SIGNED

    def test_mark_pre_signed_replaces_only_last_byte(self, order):
        order.attach_signature(SIGNATURE)
        order.mark_pre_signed()

        assert order.signature == SIGNATURE[:-2] + "06"
        assert order.signing_state == OrderSigningState.PRE_SIGNED

    def test_cannot_pre_sign_unsigned_order(self, order):
        with pytest.raises(InvalidStateTransitionError):
            order.mark_pre_signed()

    def test_cannot_sign_twice(self, order):
        order.attach_signature(SIGNATURE)

        with pytest.raises(InvalidStateTransitionError):
            order.attach_signature(SIGNATURE)

    def test_pre_signed_is_terminal(self, order):
        order.attach_signature(SIGNATURE)
        order.mark_pre_signed()

        for state in OrderSigningState:
            with pytest.raises(InvalidStateTransitionError):
                order.transition_to(state)

    def test_invalid_signature_format(self, order):
        with pytest.raises(ValueError):
            order.attach_signature("deadbeef")

        assert order.signing_state == OrderSigningState.BUILT
