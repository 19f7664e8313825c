"""
Pytest configuration and fixtures.

Every test gets its own SQLite file under ``tmp_path``; the module
level ``settings`` object is patched so that all connections opened
during the test point at it.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from contact_manager_api.app.core.config import settings
from contact_manager_api.app.core.db import init_db
from contact_manager_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch) -> str:
    """Point the application at a fresh, migrated database."""
    db_file = str(tmp_path / "contacts-test.db")
    monkeypatch.setattr(settings, "database_url", db_file)
    init_db()
    return db_file


@pytest.fixture
def client(database) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def contact_payload() -> Dict[str, Any]:
    return {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "address": "Flat 2",
        "telephoneNumber": "+1234567890",
        "postalAddress": "123 Test St, Test City, TC 12345",
    }
