"""
Logging configuration for the feed service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Request lines are emitted by the access
log middleware in ``main`` under ``ACCESS_LOGGER``; ``run.py`` starts
uvicorn with its own access log disabled so each request is reported
once.
"""

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "post_feed_api.access"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    ``level`` is a logging level name, case insensitive; unknown names
    fall back to ``INFO``.  When ``logfile`` is given, records are also
    appended to that file.  Calling this again (e.g. each time tests
    build an application) leaves the existing configuration in place.
    """
    if logging.getLogger().handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
