"""
Logging configuration for the service and the console client.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  The
``urllib3`` connection pool used by ``requests`` logs every connection
at DEBUG level; it is kept at WARNING unless the service itself runs
at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    logging.getLogger("urllib3").setLevel(
        logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    )
    if logger.handlers:
        # Handlers already present (pytest, uvicorn or an earlier call).
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
