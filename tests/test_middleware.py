"""
Tests for request logging and error logging.
"""

import logging

from fastapi import status
from fastapi.testclient import TestClient


def test_requests_are_logged(client: TestClient, caplog) -> None:
    caplog.set_level(logging.INFO, logger="contact_manager_api.app.core.middleware")

    response = client.get("/api/contact/5")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    messages = [record.getMessage() for record in caplog.records]
    assert "Incoming request: GET /api/contact/5" in messages
    assert "Request completed successfully: 404 /api/contact/5" in messages


def test_logging_does_not_alter_response(client: TestClient, contact_payload) -> None:
    response = client.post("/api/contact", json=contact_payload)

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"] == "application/json"


def test_each_field_violation_is_logged(client: TestClient, caplog) -> None:
    caplog.set_level(logging.ERROR, logger="contact_manager_api.app.core.errors")

    client.post("/api/contact", json={"name": "Only A Name"})

    errors = [r.getMessage() for r in caplog.records if r.name.endswith("core.errors")]
    assert errors == [
        "Validation error on field 'email': Email is required",
        "Validation error on field 'telephoneNumber': Telephone number is required",
        "Validation error on field 'postalAddress': Postal address is required",
    ]
