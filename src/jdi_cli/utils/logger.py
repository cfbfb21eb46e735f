"""Rotating file logging for jdi.

Every layer logs through a child of the ``jdi_cli`` logger (``jdi_cli.codec``,
``jdi_cli.service`` ...). Only the parent carries a handler, so all records
end up in one ``jdi.log`` under the platform log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "jdi_cli"
LOG_FILE = "jdi.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the log file lives for the current user."""
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILE


def _build_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or its child ``jdi_cli.<name>``.

    The file handler is attached once, the first time any logger is requested.
    """
    global _logger
    if _logger is None:
        root = logging.getLogger(LOGGER_NAME)
        root.setLevel(logging.DEBUG)
        root.propagate = False
        if not root.handlers:
            root.addHandler(_build_handler(log_file_path()))
        _logger = root

    if name is None:
        return _logger
    return _logger.getChild(name)
