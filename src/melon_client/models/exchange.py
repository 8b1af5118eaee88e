"""Fund trading models: registered exchanges, routes and callOnExchange arguments."""

from pydantic import BaseModel, Field, field_validator
from web3 import Web3

from ..config.constants import (
    ORDER_ADDRESSES_LENGTH,
    ORDER_VALUES_LENGTH,
    ZERO_ADDRESS,
    ZERO_AMOUNT,
    ZERO_BYTES32,
)
from ..utils.address import is_valid_address


class ExchangeInfo(BaseModel):
    """An exchange registered with a fund's trading contract."""

    index: int = Field(..., description="Position in the fund's exchange list", ge=0)
    exchange: str = Field(..., description="Exchange contract address")
    adapter: str = Field(..., description="Exchange adapter contract address")
    takes_custody: bool = Field(..., description="Whether the adapter takes custody of assets")


class Routes(BaseModel):
    """Component addresses of a fund, as returned by Spoke.routes()."""

    accounting: str
    fee_manager: str
    participation: str
    policy_manager: str
    shares: str
    trading: str
    vault: str
    price_source: str
    registry: str
    version: str
    engine: str
    mln_token: str


class OpenMakeOrder(BaseModel):
    """An open make order tracked by the trading contract."""

    id: int = Field(..., ge=0)
    expires_at: int = Field(..., ge=0)
    order_index: int = Field(..., ge=0)
    buy_asset: str

    @property
    def exists(self) -> bool:
        """Check if the slot holds an order (expiry of zero means empty)."""
        return self.expires_at != 0


class MatchingMarketOffer(BaseModel):
    """An offer on an OasisDex matching market."""

    id: int = Field(..., ge=0)
    owner: str
    pay_amount: int = Field(..., ge=0)
    pay_token: str
    buy_amount: int = Field(..., ge=0)
    buy_token: str


def empty_order_addresses() -> list[str]:
    return [ZERO_ADDRESS] * ORDER_ADDRESSES_LENGTH


def empty_order_values() -> list[int]:
    return [ZERO_AMOUNT] * ORDER_VALUES_LENGTH


class CallOnExchangeArgs(BaseModel):
    """Normalized calldata relayed by Trading.callOnExchange to an exchange adapter.

    Every adapter produces this shape regardless of the exchange's native order
    format. The address and value arrays always have exactly 6 and 8 elements;
    unused slots hold zero sentinels.
    """

    exchange_index: int = Field(..., description="Index of the exchange in the fund", ge=0)
    method_signature: str = Field(..., description="Canonical adapter method signature")
    order_addresses: list[str] = Field(default_factory=empty_order_addresses)
    order_values: list[int] = Field(default_factory=empty_order_values)
    identifier: str = Field(default=ZERO_BYTES32, description="bytes32 order identifier")
    maker_asset_data: str = Field(default=ZERO_BYTES32)
    taker_asset_data: str = Field(default=ZERO_BYTES32)
    signature: str = Field(default=ZERO_BYTES32)

    @field_validator("order_addresses")
    @classmethod
    def validate_order_addresses(cls, v: list[str]) -> list[str]:
        """Validate address arity and format."""
        if len(v) != ORDER_ADDRESSES_LENGTH:
            raise ValueError(
                f"order_addresses must have exactly {ORDER_ADDRESSES_LENGTH} elements, got {len(v)}"
            )
        for addr in v:
            if not is_valid_address(addr):
                raise ValueError(f"Invalid Ethereum address format: {addr}")
        return v

    @field_validator("order_values")
    @classmethod
    def validate_order_values(cls, v: list[int]) -> list[int]:
        """Validate value arity and sign."""
        if len(v) != ORDER_VALUES_LENGTH:
            raise ValueError(
                f"order_values must have exactly {ORDER_VALUES_LENGTH} elements, got {len(v)}"
            )
        if any(value < 0 for value in v):
            raise ValueError("order_values must be unsigned")
        return v

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Validate the identifier is a 32-byte hex value."""
        if not v.startswith("0x") or len(v) != 66:
            raise ValueError(f"identifier must be 32 bytes of hex, got {v}")
        int(v, 16)
        return v

    @field_validator("maker_asset_data", "taker_asset_data", "signature")
    @classmethod
    def validate_hex_blob(cls, v: str) -> str:
        """Validate blobs are non-empty hex."""
        if not v.startswith("0x") or len(v) < 4 or len(v) % 2 != 0:
            raise ValueError(f"Invalid hex blob: {v}")
        int(v, 16)
        return v

    def to_contract_args(self) -> list:
        """Positional arguments for Trading.callOnExchange."""
        return [
            self.exchange_index,
            self.method_signature,
            [Web3.to_checksum_address(addr) for addr in self.order_addresses],
            self.order_values,
            self.identifier,
            self.maker_asset_data,
            self.taker_asset_data,
            self.signature,
        ]
