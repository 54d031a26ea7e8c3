"""Logging configuration for lsgrid.

Diagnostics go to stderr at a level picked by ``-v``; ``--log-file`` adds a
file that always receives DEBUG records.
"""

import logging
import os
import sys
from typing import Optional

VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``lsgrid`` logger.

    Args:
        verbosity: Number of ``-v`` flags given.
        log_file: Optional path of a file to append log records to.

    Returns:
        Configured ``lsgrid`` logger.
    """
    logger = logging.getLogger("lsgrid")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    console_handler.setLevel(VERBOSITY_LEVELS.get(verbosity, logging.DEBUG))
    logger.addHandler(console_handler)

    if log_file:
        # Create directory if it doesn't exist
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
