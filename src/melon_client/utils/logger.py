"""structlog setup shared by the client and the CLI."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

# Longest hex value logged as-is: a 32-byte hash with its 0x prefix
MAX_HEX_LENGTH = 66

# Third-party loggers that flood DEBUG output with raw JSON-RPC payloads
NOISY_LOGGERS = ("web3", "urllib3", "aiohttp")


def shorten_hex_values(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Truncate calldata, signatures and asset data in log entries.

    Addresses and hashes are short enough to be kept intact.
    """
    for key, value in event_dict.items():
        if isinstance(value, str) and value.startswith("0x") and len(value) > MAX_HEX_LENGTH:
            event_dict[key] = f"{value[:MAX_HEX_LENGTH]}...({len(value) - 2} hex chars)"
    return event_dict


def _processors(json_logs: bool) -> list[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        shorten_hex_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Route structlog through the standard library logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render one JSON object per line instead of console output
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))

    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach fields (e.g. fund=..., command=...) to every following log entry."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
