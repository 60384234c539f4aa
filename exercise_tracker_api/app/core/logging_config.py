"""
Logging configuration for the exercise tracker.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger.  The MongoDB driver and the ODM log every
command and heartbeat at DEBUG, so they are held at WARNING unless the
application itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third‑party loggers that are too chatty below WARNING.
NOISY_LOGGERS = ("pymongo", "beanie")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to copy log records to.  No file handler is
        added when it is empty.
    quiet : Iterable[str]
        Logger names raised to WARNING when ``level`` is above DEBUG.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a repeated ``create_app``.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
