"""Off-chain 0x order model."""

from pydantic import BaseModel, Field, field_validator

from ..config.constants import ZERO_ADDRESS
from ..core.enums import OrderSigningState, SignatureType
from ..core.exceptions import InvalidStateTransitionError
from ..utils.address import is_valid_address


class ZeroExOrder(BaseModel):
    """Represents a 0x v2 order built for a fund."""

    exchange_address: str = Field(..., description="0x exchange contract address")
    maker_address: str = Field(..., description="Maker address (the fund's trading contract)")
    taker_address: str = Field(default=ZERO_ADDRESS, description="Taker address (zero = anyone)")
    sender_address: str = Field(default=ZERO_ADDRESS, description="Sender address (zero = anyone)")
    fee_recipient_address: str = Field(default=ZERO_ADDRESS, description="Fee recipient address")
    expiration_time_seconds: int = Field(..., description="Expiration as unix timestamp", ge=0)
    salt: int = Field(..., description="Random salt", ge=0)
    maker_asset_amount: int = Field(..., description="Maker asset amount in base units", ge=0)
    taker_asset_amount: int = Field(..., description="Taker asset amount in base units", ge=0)
    maker_asset_data: str = Field(..., description="Encoded maker asset")
    taker_asset_data: str = Field(..., description="Encoded taker asset")
    maker_fee: int = Field(default=0, description="Maker fee in ZRX base units", ge=0)
    taker_fee: int = Field(default=0, description="Taker fee in ZRX base units", ge=0)
    signature: str | None = Field(None, description="Signature blob (hex)")
    signing_state: OrderSigningState = Field(
        default=OrderSigningState.BUILT, description="Signing state"
    )

    @field_validator(
        "exchange_address",
        "maker_address",
        "taker_address",
        "sender_address",
        "fee_recipient_address",
    )
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate address format."""
        if not is_valid_address(v):
            raise ValueError(f"Invalid Ethereum address format: {v}")
        return v

    @property
    def is_signed(self) -> bool:
        """Check if a signature has been attached."""
        return self.signature is not None

    def transition_to(self, new_state: OrderSigningState) -> None:
        """Transition order to a new signing state."""
        valid_transitions = {
            OrderSigningState.BUILT: {OrderSigningState.SIGNED},
            OrderSigningState.SIGNED: {OrderSigningState.PRE_SIGNED},
            OrderSigningState.PRE_SIGNED: set(),  # Terminal state
        }

        if new_state not in valid_transitions.get(self.signing_state, set()):
            raise InvalidStateTransitionError(
                f"Cannot transition from {self.signing_state.value} to {new_state.value}"
            )

        self.signing_state = new_state

    def attach_signature(self, signature: str) -> None:
        """Attach the signature produced by a signing primitive."""
        if not signature.startswith("0x") or len(signature) < 4:
            raise ValueError(f"Invalid signature: {signature}")

        self.transition_to(OrderSigningState.SIGNED)
        self.signature = signature

    def mark_pre_signed(self) -> None:
        """Replace the trailing signature type byte with PRE_SIGNED."""
        self.transition_to(OrderSigningState.PRE_SIGNED)
        self.signature = f"{self.signature[:-2]}{SignatureType.PRE_SIGNED.value:02x}"
