"""Logging setup for the harvester.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached here, once, by whichever entry point runs the pipeline.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler installed by the last configure_logging() call.
_handler: Optional[logging.Handler] = None


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a console handler to the ``harvester`` logger and set its level.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("harvester")
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(_handler)
    return logger
