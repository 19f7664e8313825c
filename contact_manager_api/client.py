"""Contact Manager API client.

A thin wrapper around the contact REST endpoints built on the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with keys ``status_code`` and ``message``.

Example::

    api = ContactManagerAPI(base_url="http://localhost:8000")
    page, error = api.search_contacts("johnson")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]

CONTACT_PATH = "/api/contact"


class ContactManagerAPI:
    """Client for the contact CRUD and search endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Error responses of the service are plain text, so the message of
        a failed request is the response body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(
        self, page: int = 0, size: int = 10
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of contacts."""
        return self._request("GET", CONTACT_PATH, params={"page": page, "size": size})

    def get_contact(self, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"{CONTACT_PATH}/{contact_id}")

    def create_contact(
        self, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a contact.

        Args:
            payload: Contact fields using the API's camelCase names.
        Returns:
            A tuple ``(contact, error)``; ``contact`` includes the new id.
        """
        return self._request("POST", CONTACT_PATH, json_body=payload)

    def update_contact(
        self, contact_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", f"{CONTACT_PATH}/{contact_id}", json_body=payload)

    def delete_contact(self, contact_id: Any) -> Tuple[bool, Optional[ApiError]]:
        """Delete a contact.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{CONTACT_PATH}/{contact_id}")
        if error:
            return False, error
        return True, None

    def search_contacts(
        self, keyword: str, page: int = 0, size: int = 10
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Search contacts by (part of) their name, ignoring case."""
        return self._request(
            "GET",
            f"{CONTACT_PATH}/search",
            params={"searchKeyword": keyword, "page": page, "size": size},
        )
