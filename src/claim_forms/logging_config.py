"""
Logging setup for the CLI and the API server.
"""

import logging
import sys

from .config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """
    Send ``claim_forms`` log records to stderr.

    Args:
        level: Level name (defaults to config value)
    """
    logger = logging.getLogger("claim_forms")
    logger.setLevel((level or config.LOG_LEVEL).upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
