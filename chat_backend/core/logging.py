# chat_backend/core/logging.py

import logging
import sys

from chat_backend.core.config import settings


DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# MongoDB driver chatter (server selection, heartbeats, pool events)
QUIET_LOGGERS = ("pymongo", "pymongo.serverSelection", "pymongo.connection", "motor")


def setup_logging(level_name: str | None = None) -> None:
    """
    Configure application-wide logging.

    Level comes from the argument or settings.LOG_LEVEL (default INFO);
    unknown names fall back to INFO. Logs go to stdout. If a handler is
    already installed (uvicorn does this) only the level is applied.
    """
    level = getattr(logging, (level_name or settings.LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Usage:
        from chat_backend.core.logging import get_logger

        logger = get_logger(__name__)
        logger.info("Room store ready")
    """
    return logging.getLogger(name)
