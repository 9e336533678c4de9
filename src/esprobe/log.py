"""
Package logging setup (Rich console)

All modules log through ``logging.getLogger(__name__)``; the CLI calls
``setup_logging()`` once to attach a RichHandler to the package root logger.
Markup is off: engine error reasons contain square brackets (``index [test]``).
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PKG_NAME = "esprobe"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the package root logger.

    The RichHandler is added only on the first call; later calls just
    adjust the level.

    Args:
        level: Log level (default: INFO)

    Returns:
        Package root logger
    """
    logger = logging.getLogger(PKG_NAME)
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if isinstance(h, RichHandler)), None
    )
    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
        logger.addHandler(handler)
    handler.setLevel(level)

    return logger
