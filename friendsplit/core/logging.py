"""Logging setup"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the package logger.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    logger = logging.getLogger("friendsplit")
    logger.setLevel(level)

    # Only attach a handler once, even if the app module is reloaded
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
