"""EIP-712 hashing of 0x v2 orders."""

from eth_abi import encode as abi_encode
from web3 import Web3

from src.melon_client.config.constants import (
    ZEROEX_EIP712_DOMAIN_NAME,
    ZEROEX_EIP712_DOMAIN_SCHEMA,
    ZEROEX_EIP712_DOMAIN_VERSION,
    ZEROEX_ORDER_SCHEMA,
)
from src.melon_client.models.order import ZeroExOrder
from src.melon_client.utils.address import to_checksum

DOMAIN_TYPEHASH = Web3.keccak(text=ZEROEX_EIP712_DOMAIN_SCHEMA)
ORDER_TYPEHASH = Web3.keccak(text=ZEROEX_ORDER_SCHEMA)


def domain_separator(exchange_address: str) -> bytes:
    """Hash of the 0x EIP-712 domain bound to an exchange contract."""
    return Web3.keccak(
        abi_encode(
            ["bytes32", "bytes32", "bytes32", "address"],
            [
                DOMAIN_TYPEHASH,
                Web3.keccak(text=ZEROEX_EIP712_DOMAIN_NAME),
                Web3.keccak(text=ZEROEX_EIP712_DOMAIN_VERSION),
                to_checksum(exchange_address),
            ],
        )
    )


def order_struct_hash(order: ZeroExOrder) -> bytes:
    return Web3.keccak(
        abi_encode(
            [
                "bytes32",
                "address",
                "address",
                "address",
                "address",
                "uint256",
                "uint256",
                "uint256",
                "uint256",
                "uint256",
                "uint256",
                "bytes32",
                "bytes32",
            ],
            [
                ORDER_TYPEHASH,
                to_checksum(order.maker_address),
                to_checksum(order.taker_address),
                to_checksum(order.fee_recipient_address),
                to_checksum(order.sender_address),
                order.maker_asset_amount,
                order.taker_asset_amount,
                order.maker_fee,
                order.taker_fee,
                order.expiration_time_seconds,
                order.salt,
                Web3.keccak(hexstr=order.maker_asset_data),
                Web3.keccak(hexstr=order.taker_asset_data),
            ],
        )
    )


def get_order_hash(order: ZeroExOrder) -> str:
    """Compute the hash a 0x v2 exchange uses to identify and verify an order.

    Args:
        order: Order to hash (the signature is not part of the hash)

    Returns:
        str: 32-byte order hash as hex
    """
    digest = Web3.keccak(
        b"\x19\x01" + domain_separator(order.exchange_address) + order_struct_hash(order)
    )
    return Web3.to_hex(digest)
