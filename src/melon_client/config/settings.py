"""Client settings, read from MELON_* environment variables or a .env file."""

from typing import Literal

from dotenv import load_dotenv
from eth_account import Account
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.melon_client.config.constants import (
    DEFAULT_ORDER_DURATION_SECONDS,
    TRANSACTION_TIMEOUT_SECONDS,
)

load_dotenv()

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

TRUTHY = ("true", "1", "yes", "y", "on")


class Settings(BaseSettings):
    """Connection, signing and session options of the client."""

    model_config = SettingsConfigDict(
        env_prefix="MELON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    rpc_url: str = Field(..., description="JSON-RPC endpoint of an Ethereum node (http or https)")

    # Without a key, transactions and eth_sign requests are signed by the node
    private_key: str | None = Field(None, description="0x-prefixed 32-byte hex private key")
    account_address: str | None = Field(None, description="Derived from private_key")

    cache_enabled: bool = Field(
        default=True, description="Share identical contract reads within a session"
    )

    default_order_duration_seconds: int = Field(
        default=DEFAULT_ORDER_DURATION_SECONDS,
        gt=0,
        description="Lifetime of 0x orders built without an explicit duration",
    )
    transaction_timeout_seconds: int = Field(
        default=TRANSACTION_TIMEOUT_SECONDS,
        gt=0,
        le=3600,
        description="How long to wait for a transaction receipt",
    )

    log_level: LogLevel = Field(default="INFO")
    json_logs: bool = Field(default=False)

    @field_validator("rpc_url")
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"rpc_url must be an http(s) URL, got {v!r}")
        return v

    @field_validator("private_key", mode="before")
    @classmethod
    def empty_key_is_none(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("cache_enabled", "json_logs", mode="before")
    @classmethod
    def parse_flag(cls, v) -> bool:
        if isinstance(v, str):
            return v.strip().lower() in TRUTHY
        return bool(v)

    @model_validator(mode="after")
    def derive_account_address(self) -> "Settings":
        """Check the private key and derive the address it signs for."""
        if self.private_key is None:
            return self

        if not self.private_key.startswith("0x") or len(self.private_key) != 66:
            raise ValueError("private_key must be 0x followed by 64 hex characters")
        try:
            account = Account.from_key(self.private_key)
        except ValueError as e:
            raise ValueError(f"private_key is not a valid secp256k1 key: {e}") from e

        self.account_address = account.address
        return self
