"""Logging setup shared by the entrypoints. Modules only ever call `logging.getLogger(__name__)`."""

import logging
from typing import Optional

from src.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger. Falls back to the configured log level."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level_name, format=LOG_FORMAT, force=True)
