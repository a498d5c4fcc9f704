"""Logging setup shared by the server entrypoint."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging and return the ``pixel_snake`` logger.

    The level comes from ``level``, then ``PIXEL_SNAKE_LOG_LEVEL``, then INFO.
    The uvicorn loggers are aligned with it.
    """
    raw_level = level if level is not None else os.getenv("PIXEL_SNAKE_LOG_LEVEL")
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    app_logger = logging.getLogger("pixel_snake")
    app_logger.setLevel(resolved_level)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(resolved_level)

    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
