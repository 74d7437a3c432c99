"""Logging setup. TJBot level names map onto stdlib logging levels."""

import logging
from typing import Optional

LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "silly": logging.DEBUG,
}

_handler: Optional[logging.Handler] = None


def to_logging_level(level: str) -> int:
    """Numeric logging level for a TJBot level name. Unknown names mean INFO."""
    return LEVELS.get(str(level).lower(), logging.INFO)


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a stream handler to the tjbot logger (once) and set its level."""
    global _handler
    root = logging.getLogger("tjbot")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
        root.addHandler(_handler)
    root.setLevel(to_logging_level(level))
    return root
