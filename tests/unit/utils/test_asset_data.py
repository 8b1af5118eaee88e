"""Tests for the 0x ERC20 asset data codec."""

import pytest

from src.melon_client.core.exceptions import InvalidAssetDataError
from src.melon_client.utils.asset_data import decode_erc20_asset_data, encode_erc20_asset_data
from tests.fixtures.funds import MLN


class TestEncodeErc20AssetData:
    def test_layout(self):
        asset_data = encode_erc20_asset_data(MLN)

        assert asset_data.startswith("0xf47261b0")
        # 4-byte proxy id followed by one 32-byte word
        assert len(asset_data) == 2 + 8 + 64
        assert asset_data.endswith(MLN[2:].lower())

    def test_invalid_address(self):
        with pytest.raises(ValueError):
            encode_erc20_asset_data("0x1234")


class TestDecodeErc20AssetData:
    def test_decodes_token_address(self):
        asset_data = "0xf47261b0" + "0" * 24 + MLN[2:]
        assert decode_erc20_asset_data(asset_data) == MLN

    def test_proxy_id_is_case_insensitive(self):
        asset_data = "0xF47261B0" + "0" * 24 + MLN[2:]
        assert decode_erc20_asset_data(asset_data) == MLN

    def test_rejects_other_proxies(self):
        # ERC721 proxy id
        with pytest.raises(InvalidAssetDataError):
            decode_erc20_asset_data("0x02571792" + "0" * 24 + MLN[2:])

    def test_rejects_truncated_data(self):
        with pytest.raises(InvalidAssetDataError):
            decode_erc20_asset_data("0xf47261b0" + "00" * 4)
