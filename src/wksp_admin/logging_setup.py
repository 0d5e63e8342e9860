"""Logging configuration for wksp-admin.

A single stderr handler is attached to the ``wksp_admin`` logger:
WARNING and above by default, DEBUG when ``--verbose`` is given.
Listings and prompts are rendered by the CLI layer, never logged.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME: str = "wksp_admin"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the package logger.

    Calling this more than once replaces the previously installed
    handler instead of stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
            if verbose
            else "%(levelname)-8s  %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
