"""Structured JSON logging configuration."""

import logging
import sys
from typing import IO, Optional

from pythonjsonlogger import jsonlogger


NULL_LOGGER_NAME = "bearer_agent.null"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logger(
    name: str = "bearer_agent",
    level: str = "INFO",
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Build the logger handed to the transports by the CLI or a host application.

    Records are written one JSON object per line. Calling this again for the
    same name replaces the previous handler.

    Args:
        name: Logger name
        level: Level name, case-insensitive
        stream: Destination (stdout when omitted)

    Returns:
        logging.Logger: Non-propagating logger with a single JSON handler
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    for old in list(logger.handlers):
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT, timestamp=True))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def null_logger() -> logging.Logger:
    """
    Return a logger that discards everything.

    Used when the host application does not hand a logger to the agent.

    Returns:
        logging.Logger: Logger with a NullHandler and no propagation
    """
    logger = logging.getLogger(NULL_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
