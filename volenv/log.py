"""Logging setup for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed here by the CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Route the ``volenv`` logger hierarchy to stderr through Rich.

    Any handler from an earlier call is replaced, so the new handler writes
    to the ``sys.stderr`` current at this call.
    """
    logger = logging.getLogger("volenv")
    logger.setLevel(str(level).upper())
    for stale in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(stale)
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
