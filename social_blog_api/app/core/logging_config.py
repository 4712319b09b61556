"""
Logging configuration for the API process.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE``
is set, a size-rotated file handler) to the root logger.  Uvicorn's
own loggers are pointed at the same handlers so request lines and
application messages share one format.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotate the log file at 5 MB, keeping three old files.
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send API and uvicorn records to stderr and, optionally, ``logfile``.

    ``level`` comes from ``LOG_LEVEL``; an unrecognised name means
    ``INFO``.  ``logfile`` comes from ``LOG_FILE`` and its directory is
    created if missing.  Calls after the first are ignored.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app runs once per test; keep the first configuration.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
