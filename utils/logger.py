# utils/logger.py

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "slainte") -> logging.Logger:
    """Returns a named logger, configuring the root handler once from LOG_LEVEL."""
    root = logging.getLogger()
    if not root.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    return logging.getLogger(name)
