"""
Logging configuration for the translator.

Translation logs only kinds, type names and status codes.
Error messages and payload data are never logged.
"""

import logging
import sys
from typing import Optional

from errorbridge.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "errorbridge"


def _to_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None, package_level: Optional[str] = None
) -> None:
    """Configure logging for an application embedding the translator.

    Args:
        level: Root log level string (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``settings.log_level``.
        package_level: Separate level for ``errorbridge`` loggers, e.g.
            ``"DEBUG"`` to see every translation. Inherits ``level`` when unset.
    """
    logging.basicConfig(
        level=_to_level(level or settings.log_level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_level is None:
        package_logger.setLevel(logging.NOTSET)
    else:
        package_logger.setLevel(_to_level(package_level))
