"""Console logging for the extractor CLI."""

from __future__ import annotations

import logging
import sys

from say_dictionary.app.core.config import settings

_CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Install a single stderr handler on the ``say_dictionary`` logger."""
    level = logging.DEBUG if debug else logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    logger = logging.getLogger("say_dictionary")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
