"""
Logging setup
"""

import logging
import sys

from ..config import LOG_LEVEL

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "lox") -> logging.Logger:
    """Return a logger under the ``lox`` hierarchy, configuring the root ``lox`` logger once."""
    root = logging.getLogger("lox")
    if not root.handlers:
        root.setLevel(getattr(logging, LOG_LEVEL, logging.WARNING))
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.propagate = False
    if name == "lox" or name.startswith("lox."):
        return logging.getLogger(name)
    return logging.getLogger(f"lox.{name}")


def set_level(level: str) -> None:
    """Override the configured level for every ``lox`` logger."""
    get_logger().setLevel(getattr(logging, level.upper(), logging.WARNING))
