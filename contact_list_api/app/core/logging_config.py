"""
Logging setup for the contact service.

Every module logs through ``logging.getLogger(__name__)``; the only
configuration happens here, called by ``create_app`` with the
``LOG_LEVEL`` and ``LOG_FILE`` settings.  Contact mutations are logged
by the service at INFO, each request by the HTTP middleware in
``core.responses``, and rejected payloads at DEBUG.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Install console (and optional file) handlers on the root logger.

    The test suite builds a new application per test, so a root logger
    that already has handlers is left as it is.

    Parameters
    ----------
    level : str
        Level name from ``Settings.log_level``.
    logfile : Optional[str]
        ``Settings.log_file``; when given, records are also appended to
        this file, resolved against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
