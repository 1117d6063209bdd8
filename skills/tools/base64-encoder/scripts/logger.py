#!/usr/bin/env python3
"""
Base64 Encoder/Decoder - Logger Module

Logs go to stderr so that stdout carries nothing but the converted data.
"""

import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "b64"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the tool's root logger.

    Args:
        log_level: level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to WARNING
        stream: handler stream, defaults to sys.stderr

    Returns:
        the configured logger
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str = "") -> logging.Logger:
    """Return the tool logger, or a named child of it."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
