"""Logging configuration for the create-kii-dapp CLI.

Diagnostics go to stderr through Rich so they never mix with the
instructions printed on stdout.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger.

    Uses a ``RichHandler`` when stderr is a terminal and a plain
    ``StreamHandler`` otherwise.

    Args:
        verbose: Log at DEBUG instead of INFO.
    """
    level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if sys.stderr.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=verbose,
            show_path=verbose,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    handler.setLevel(level)
    root_logger.addHandler(handler)

    root_logger.debug("Logging configured: level=%s", logging.getLevelName(level))
