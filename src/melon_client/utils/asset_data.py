"""0x ERC20 asset data codec."""

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError
from web3 import Web3

from src.melon_client.config.constants import ZEROEX_ERC20_PROXY_ID
from src.melon_client.core.exceptions import InvalidAssetDataError
from src.melon_client.utils.address import to_checksum


def encode_erc20_asset_data(token_address: str) -> str:
    """Encode a token address as 0x ERC20 asset data.

    Args:
        token_address: ERC20 token contract address

    Returns:
        str: Hex asset data (proxy id followed by the ABI-encoded address)
    """
    encoded = abi_encode(["address"], [to_checksum(token_address)])
    return ZEROEX_ERC20_PROXY_ID + encoded.hex()


def decode_erc20_asset_data(asset_data: str) -> str:
    """Decode 0x ERC20 asset data into the token address.

    Args:
        asset_data: Hex asset data

    Returns:
        str: Checksummed token address

    Raises:
        InvalidAssetDataError: If the blob is not ERC20 asset data
    """
    data = asset_data.lower()
    if not data.startswith(ZEROEX_ERC20_PROXY_ID):
        raise InvalidAssetDataError(f"Asset data {asset_data} is not ERC20 asset data")

    try:
        (token_address,) = abi_decode(["address"], bytes.fromhex(data[len(ZEROEX_ERC20_PROXY_ID) :]))
    except (DecodingError, ValueError) as e:
        raise InvalidAssetDataError(f"Failed to decode asset data {asset_data}: {e}") from e

    return Web3.to_checksum_address(token_address)
