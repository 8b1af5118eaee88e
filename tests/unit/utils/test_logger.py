"""Tests for logging configuration."""

import structlog

from src.melon_client.utils.logger import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    shorten_hex_values,
)


class TestShortenHexValues:
    def test_long_hex_is_truncated(self):
        calldata = "0x" + "ab" * 100

        event_dict = shorten_hex_values(None, "info", {"event": "x", "data": calldata})

        assert event_dict["data"].startswith(calldata[:66])
        assert event_dict["data"].endswith("(200 hex chars)")

    def test_hashes_and_addresses_are_kept(self):
        order_hash = "0x" + "ab" * 32
        address = "0x" + "11" * 20

        event_dict = shorten_hex_values(None, "info", {"hash": order_hash, "address": address})

        assert event_dict == {"hash": order_hash, "address": address}

    def test_non_hex_values_are_kept(self):
        event_dict = shorten_hex_values(None, "info", {"count": 3, "text": "x" * 100})
        assert event_dict == {"count": 3, "text": "x" * 100}


class TestConfigureLogging:
    def test_configure_and_log(self):
        configure_logging(log_level="DEBUG", json_logs=True)

        logger = get_logger("tests")
        logger.info("event", value=1)

        assert structlog.is_configured()

    def test_context_binding(self):
        clear_context()
        bind_context(fund="0x1111")
        assert structlog.contextvars.get_contextvars() == {"fund": "0x1111"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
