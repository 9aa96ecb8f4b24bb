"""
Logging setup for the Product API.

Request lines, service mutations and error reports all go through the
standard ``logging`` module under the ``product_api`` logger tree.
``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger the first time it runs.  Later calls, made
whenever ``create_app`` builds another application, leave the existing
handlers alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach handlers to the root logger unless it already has some.

    ``level`` is a level name such as ``"DEBUG"``; unknown names fall
    back to ``INFO``.  ``logfile``, taken from ``LOG_FILE``, adds a
    UTF-8 file handler next to the console one.

    Returns ``True`` when handlers were installed by this call.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
