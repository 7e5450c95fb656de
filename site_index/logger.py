# === FILE: site_index/logger.py ===
"""Project logger for SiteIndex.

Everything logs through the ``SiteIndex`` logger::

    from site_index.logger import logger
    logger.info("Scan commenced")

The CLI calls :func:`configure` once per run to set the level, the format and
an optional rotating log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteIndex"


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger.

    Output always goes to stdout; *log_file* adds a 5 MB rotating file with
    three backups.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "DEFAULT_FORMAT"]
