"""Debug log setup.

The terminal belongs to the TUI, so records go to an append-only file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from foodorder.config import DEBUG_LOG_PATH

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> logging.Handler | None:
    """Attach a file handler to the ``foodorder`` logger.

    Returns None when the log file cannot be opened; logging must never stop
    the app from starting.
    """
    root = logging.getLogger("foodorder")
    root.setLevel(level)
    try:
        log_file = Path(path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        root.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    return handler
