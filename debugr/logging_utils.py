from __future__ import annotations

import sys
from typing import Any

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{extra[component]}:{function}:{line} | {message}"
)


def get_logger(component: str) -> Any:
    """Return a loguru logger bound to a component name."""
    return logger.bind(component=component)


def setup_logging(debug: bool = False, sink: Any = None) -> str:
    """
    Configure the single stderr sink used by debugr.

    Debug mode traces requests, responses and parser output at DEBUG level;
    otherwise only warnings (failed actions) and errors are shown.
    Returns the level name that was installed.
    """
    level = "DEBUG" if debug else "WARNING"
    logger.remove()
    logger.configure(extra={"component": "debugr"})
    logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    return level
