"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real home directory:
the data file, the config directory and the log directory all land in
*tmp_path*.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

FIXED_TIMESTAMP = "2024-06-01 10:00:00"


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path, monkeypatch):
    """Send log output to *tmp_path* and drop the handler afterwards."""
    from jdi_cli.utils import logger as logger_module

    monkeypatch.setattr(
        logger_module, "user_log_dir", lambda *args, **kwargs: str(tmp_path / "logs")
    )
    monkeypatch.setattr(logger_module, "_logger", None)
    yield
    app_logger = logging.getLogger("jdi_cli")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Point the config manager at a temporary directory."""
    import jdi_cli.config as config_module

    monkeypatch.setattr(
        config_module, "user_config_dir", lambda *args, **kwargs: str(tmp_path / "config")
    )
    monkeypatch.setattr(config_module, "_config_manager", None)
    monkeypatch.delenv("JDI_DATA_FILE", raising=False)


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Route the todo data file to *tmp_path* via JDI_DATA_FILE."""
    path = tmp_path / "todos.json"
    monkeypatch.setenv("JDI_DATA_FILE", str(path))
    return path


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


@pytest.fixture()
def frozen_clock():
    """Stamp every created/completed task with FIXED_TIMESTAMP."""
    with patch("jdi_cli.core.todo_list._utc_timestamp", return_value=FIXED_TIMESTAMP):
        yield FIXED_TIMESTAMP
