"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real config/log directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

import todoist_rest.utils.logger as logger_mod
from todoist_rest.services.config_service import get_config_service


def _reset_logger() -> None:
    logger_mod._logger = None
    existing = logging.getLogger("todoist_rest")
    for handler in list(existing.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        handler.close()
        existing.removeHandler(handler)
    existing.setLevel(logging.NOTSET)
    existing.propagate = True


# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    _reset_logger()
    with patch("todoist_rest.services.config_service.user_config_dir", return_value=str(config_dir)):
        with patch("todoist_rest.utils.logger.user_log_dir", return_value=str(log_dir)):
            yield tmp_path
    _reset_logger()
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Wire payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def read_model() -> dict:
    """A complete read-model task as returned by the service."""
    return {
        "comment_count": 10,
        "completed": True,
        "content": "My task",
        "due": {
            "date": "2016-09-01",
            "recurring": True,
            "datetime": "2016-09-01T09:00:00Z",
            "string": "tomorrow at 12",
            "timezone": "Europe/Moscow",
        },
        "id": 1234,
        "indent": 1,
        "label_ids": [124, 125, 128],
        "order": 123,
        "priority": 1,
        "project_id": 2345,
        "url": "https://todoist.com/showTask?id=12345&sync_id=56789",
    }
