"""File logging for WorkSleep."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from worksleep.workspace import log_path

LOGGER_NAME = "worksleep"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO", root: Path | None = None) -> logging.Logger:
    """Send the worksleep logger tree to a rotating file in the workspace.

    Existing handlers are replaced so repeated calls honor the latest level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG)

    path = log_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    fh = RotatingFileHandler(path, maxBytes=2_000_000, backupCount=2, encoding="utf-8")
    lvl = logging.getLevelName(level.upper())
    fh.setLevel(lvl if isinstance(lvl, int) else logging.INFO)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(fh)
    return logger
