"""
Logging configuration for the AJAX Lab API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and routes uvicorn's own loggers through
it, so server start‑up lines, access lines and application records
share one format, one level and the same log file.  Every other module
simply calls ``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn; by default each carries its own handler.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and align the server loggers with it.

    Root handlers are attached only once per process, so building
    several applications in one interpreter (as the test suite does)
    does not duplicate output.  The level is applied on every call.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives a copy of every record.  Empty or
        ``None`` disables the file handler.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if logfile:
            file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True
