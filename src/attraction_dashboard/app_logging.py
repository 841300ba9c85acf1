"""Logging configuration helpers."""

import logging

_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger and set its level.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("attraction_dashboard")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
