"""Core enumerations for the Melon fund client."""

from enum import Enum, IntEnum


class SignatureType(IntEnum):
    """0x v2 signature types (trailing byte of a signature blob)."""

    ILLEGAL = 0
    INVALID = 1
    EIP712 = 2
    ETH_SIGN = 3
    WALLET = 4
    VALIDATOR = 5
    PRE_SIGNED = 6


class OrderSigningState(str, Enum):
    """Signing state of an off-chain order."""

    BUILT = "BUILT"  # Order created, no signature attached
    SIGNED = "SIGNED"  # Signature from the signing primitive attached
    PRE_SIGNED = "PRE_SIGNED"  # Signature type byte replaced with PRE_SIGNED


class ExchangeMethod(str, Enum):
    """Exchange adapter entry points relayed through callOnExchange."""

    MAKE_ORDER = "makeOrder"
    TAKE_ORDER = "takeOrder"
    CANCEL_ORDER = "cancelOrder"
