"""Logging setup for the ledger core.

Modules log through ``get_logger(__name__)``. Service events attach their
structured fields (account number, CPF, amounts) under the ``extra`` key::

    logger.info("Opened account %d", number, extra={"extra": {"account": number}})

``JsonFormatter`` merges those fields into each JSON line; the standard
formatter only prints the message.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

from ledger_core.exceptions import LedgerError

LOG_FORMATS = ("standard", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Third-party loggers kept at WARNING whatever the ledger level
QUIET_LOGGERS = ("faker",)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install a single console handler on the root logger.

    Parameters
    ----------
    level : str
        Log level name, case-insensitive. Unknown names fall back to INFO.
    format_type : str
        "standard" or "json". Anything else is treated as "standard".
    stream : IO[str] | None
        Where records go (default ``sys.stdout``).

    Returns
    -------
    logging.Handler
        The installed handler.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("ledger_core").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Ledger errors attached with ``exc_info`` also report their class name
    under ``error``, so rejected operations can be counted by kind.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, LedgerError):
                log_data["error"] = type(exc).__name__
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        # Balances and amounts are Decimals
        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
