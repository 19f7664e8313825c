"""
Logging configuration for the Contact Manager API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger exactly once.  Every request is already
logged by ``core.middleware`` and every validation failure by
``core.errors``, so the access logger of the ASGI server is raised to
WARNING to avoid printing each request twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers whose output duplicates the request log of ``core.middleware``.
DUPLICATE_REQUEST_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path of a file that receives the same records as the console,
        typically set through the ``LOG_FILE`` environment variable.
    """
    for name in DUPLICATE_REQUEST_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. when ``create_app`` runs repeatedly
        # under tests.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
