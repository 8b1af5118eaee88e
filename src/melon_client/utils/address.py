"""Address helpers."""

from web3 import Web3


def is_valid_address(address: str) -> bool:
    """Validate Ethereum address format.

    Args:
        address: Address to validate

    Returns:
        bool: True if valid, False otherwise
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def same_address(a: str | None, b: str | None) -> bool:
    """Compare two addresses case-insensitively."""
    if not a or not b:
        return False
    return a.lower() == b.lower()


def to_checksum(address: str) -> str:
    """Convert an address to checksum format.

    Raises:
        ValueError: If the address is malformed
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid Ethereum address: {address}")
    return Web3.to_checksum_address(address)
