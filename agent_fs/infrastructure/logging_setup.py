"""
Logging configuration for command-line entry points.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here, once, by whoever owns the process.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from agent_fs.infrastructure.tools.config import Config


def configure_logging(level: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Route the ``agent_fs`` loggers through a RichHandler at ``level``."""
    resolved = (level or Config.LOG_LEVEL or "WARNING").upper()
    logger = logging.getLogger("agent_fs")
    logger.setLevel(getattr(logging, resolved, logging.WARNING))

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
