"""
Centralized logging utility for consistent logging across the application.
"""

import logging
import sys
from app.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to stdout at the configured LOG_LEVEL."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

        log_level = get_settings().LOG_LEVEL.upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

    return logger
