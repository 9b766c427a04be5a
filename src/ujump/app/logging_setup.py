from __future__ import annotations

import logging
import os

_FORMAT = "[%(name)s] %(levelname)s: %(message)s"
LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_handler: logging.Handler | None = None


def level_from_string(name: str | None) -> int:
    if not name:
        return logging.INFO
    return LEVEL_NAMES.get(name.upper(), logging.INFO)


def configure_logging(level: str | None = None) -> None:
    """
    Send the package's log records to stderr.

    Level priority: explicit argument, then UJUMP_LOG_LEVEL, then INFO.
    Calling it again only changes the level.
    """
    global _handler

    resolved = level_from_string(level or os.environ.get("UJUMP_LOG_LEVEL"))

    root = logging.getLogger("ujump")
    root.setLevel(resolved)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(_handler)
