"""Coloured console logging for benchmark runs."""

import logging
import sys
from typing import ClassVar


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colour codes to different log levels."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[90m",  # Grey
        "INFO": "\033[94m",  # Blue
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
    }
    RESET: ClassVar[str] = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        colour = self.COLORS.get(record.levelname, "")
        if colour:
            formatted = f"{colour}{formatted}{self.RESET}"
        return formatted


def setup_logging(verbose: bool = False, use_color: bool = True) -> logging.Logger:
    """Configure the package logger to write to stderr.

    Returns:
        The ``cache_latency_lab`` logger.
    """
    logger = logging.getLogger("cache_latency_lab")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt = "%(asctime)s %(levelname)-7s %(message)s"
    datefmt = "%H:%M:%S"
    if use_color:
        handler.setFormatter(ColoredFormatter(fmt, datefmt))
    else:
        handler.setFormatter(logging.Formatter(fmt, datefmt))
    logger.addHandler(handler)

    return logger
