"""
Tests for the logging setup.
"""

import logging

from contact_manager_api.app.core.logging_config import (
    DUPLICATE_REQUEST_LOGGERS,
    setup_logging,
)
from contact_manager_api.app.main import create_app


def test_server_access_log_is_quietened() -> None:
    create_app()

    for name in DUPLICATE_REQUEST_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
    assert "uvicorn.access" in DUPLICATE_REQUEST_LOGGERS


def test_setup_is_applied_once(tmp_path) -> None:
    root = logging.getLogger()
    setup_logging()
    handlers = list(root.handlers)

    setup_logging("DEBUG", str(tmp_path / "contacts.log"))

    assert root.handlers == handlers
    assert not (tmp_path / "contacts.log").exists()
