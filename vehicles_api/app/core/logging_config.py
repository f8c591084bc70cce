"""
Logging configuration for the Vehicles API.

``setup_logging`` is called by ``create_app`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  It attaches a console handler (and a
file handler when a log file is configured) to the root logger once,
so the store, service and error handlers all log through the same
format.  Uvicorn's per‑request access log is kept at WARNING unless the
service runs at DEBUG, because every rejected request is already
logged by the exception handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "uvicorn.access"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.getLogger(ACCESS_LOGGER).setLevel(
        logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    )

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. when ``create_app`` runs once per test.
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
