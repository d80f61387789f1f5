"""Logging setup."""
import logging
from typing import Optional

from goalboard.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the goalboard package.

    Args:
        level: Log level name; defaults to settings.log_level
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
