"""Logging configuration."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at INFO.
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "redis")


def setup_logging(level: str = "INFO", *, sql_echo: bool = False) -> None:
    """Configure root logging to stdout.

    Args:
        level: Root log level name (case-insensitive).
        sql_echo: Keep SQLAlchemy engine logs at the root level.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in NOISY_LOGGERS:
        if sql_echo and name == "sqlalchemy.engine":
            continue
        logging.getLogger(name).setLevel(logging.WARNING)
