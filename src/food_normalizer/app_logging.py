"""Logging setup for the ingest job."""

import logging
import sys

LOGGER_NAME = "food_normalizer"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Send ``food_normalizer`` records to stderr with wall-clock timestamps.

    Output chunks are written to files, so stdout is left free. Repeated calls
    only change the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
