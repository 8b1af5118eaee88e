"""Tests for address helpers."""

import pytest

from src.melon_client.utils.address import is_valid_address, same_address, to_checksum


class TestIsValidAddress:
    @pytest.mark.parametrize(
        "address",
        [
            "0x1111111111111111111111111111111111111111",
            "0xabcdefABCDEF0000000000000000000000000000",
        ],
    )
    def test_valid(self, address):
        assert is_valid_address(address) is True

    @pytest.mark.parametrize(
        "address",
        [None, "", "0x1234", "1111111111111111111111111111111111111111", "0x" + "g" * 40],
    )
    def test_invalid(self, address):
        assert is_valid_address(address) is False


class TestSameAddress:
    def test_case_insensitive(self):
        assert same_address("0xABCDEF0000000000000000000000000000000000", "0xabcdef0000000000000000000000000000000000")

    def test_missing_address(self):
        assert same_address(None, "0x1111111111111111111111111111111111111111") is False


class TestToChecksum:
    def test_checksums(self):
        address = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
        assert to_checksum(address) == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    def test_invalid(self):
        with pytest.raises(ValueError):
            to_checksum("0x1234")
