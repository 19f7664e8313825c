"""
Service layer for contacts.

``ContactService`` validates arguments, applies patch semantics on
update and turns persistence outcomes into results the API layer can
map onto HTTP status codes.  Lookups by id (get, delete, update)
report expected failures through a :class:`ContactResult`; list,
search and save return their value directly and raise on failure.

Store failures (``sqlite3.Error``) are wrapped once here in
:class:`ContactServiceError`, except for ``list_contacts`` which lets
them propagate unchanged.
"""

from __future__ import annotations

import enum
import logging
import sqlite3
from dataclasses import dataclass
from typing import Optional

from fastapi import status

from contact_manager_api.app.core.errors import ContactServiceError, InvalidArgumentError
from contact_manager_api.app.repositories.contact_repository import ContactRepository
from contact_manager_api.app.schemas.contact import (
    ContactCreate,
    ContactPage,
    ContactPatch,
    ContactRead,
    PageRequest,
)

logger = logging.getLogger(__name__)

_PATCHED_FIELDS = ("name", "email", "telephone_number", "postal_address")


class ResultStatus(enum.Enum):
    OK = status.HTTP_200_OK
    NO_CONTENT = status.HTTP_204_NO_CONTENT
    INVALID_ARGUMENT = status.HTTP_400_BAD_REQUEST
    NOT_FOUND = status.HTTP_404_NOT_FOUND
    INTERNAL_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR


@dataclass
class ContactResult:
    """Outcome of a service call addressed to a single contact."""

    status: ResultStatus
    contact: Optional[ContactRead] = None
    message: Optional[str] = None

    @property
    def status_code(self) -> int:
        return self.status.value

    @classmethod
    def invalid_id(cls, contact_id: Optional[int]) -> "ContactResult":
        return cls(ResultStatus.INVALID_ARGUMENT, message=f"Invalid contact ID: {contact_id}")

    @classmethod
    def not_found(cls, contact_id: int) -> "ContactResult":
        return cls(ResultStatus.NOT_FOUND, message=f"Contact with ID {contact_id} not found")


def _is_valid_id(contact_id: Optional[int]) -> bool:
    return contact_id is not None and contact_id > 0


class ContactService:
    """Business logic for the contact CRUD API."""

    @classmethod
    async def list_contacts(cls, page_request: PageRequest) -> ContactPage:
        """Return one page of all contacts in id order."""
        content, total = ContactRepository.find_all(page_request)
        return ContactPage.build(content, page_request, total)

    @classmethod
    async def get_contact(cls, contact_id: Optional[int]) -> ContactResult:
        if not _is_valid_id(contact_id):
            logger.warning("Rejected lookup with invalid contact ID %s", contact_id)
            return ContactResult.invalid_id(contact_id)
        contact = ContactRepository.find_by_id(contact_id)
        if contact is None:
            logger.warning("Contact %s not found", contact_id)
            return ContactResult.not_found(contact_id)
        logger.info("Retrieved contact %s", contact_id)
        return ContactResult(ResultStatus.OK, contact=contact)

    @classmethod
    async def delete_contact(cls, contact_id: Optional[int]) -> ContactResult:
        if not _is_valid_id(contact_id):
            logger.warning("Rejected delete with invalid contact ID %s", contact_id)
            return ContactResult.invalid_id(contact_id)
        try:
            deleted = ContactRepository.delete_by_id(contact_id)
        except sqlite3.Error as exc:
            logger.error("Error deleting contact %s: %s", contact_id, exc)
            return ContactResult(
                ResultStatus.INTERNAL_ERROR, message=f"Error deleting contact: {exc}"
            )
        if not deleted:
            logger.warning("Contact %s not found, nothing to delete", contact_id)
            return ContactResult.not_found(contact_id)
        logger.info("Deleted contact %s", contact_id)
        return ContactResult(ResultStatus.NO_CONTENT)

    @classmethod
    async def update_contact(
        cls, contact_id: Optional[int], patch: Optional[ContactPatch]
    ) -> ContactResult:
        """Apply ``patch`` to the stored contact.

        Only the patch fields that are not ``None`` overwrite stored
        values; the rest are kept as they are.
        """
        if not _is_valid_id(contact_id):
            logger.warning("Rejected update with invalid contact ID %s", contact_id)
            return ContactResult.invalid_id(contact_id)
        if patch is None:
            logger.warning("Rejected update of contact %s without data", contact_id)
            return ContactResult(
                ResultStatus.INVALID_ARGUMENT, message="Updated contact must not be null"
            )
        try:
            existing = ContactRepository.find_by_id(contact_id)
            if existing is None:
                logger.warning("Contact %s not found, nothing to update", contact_id)
                return ContactResult.not_found(contact_id)
            changes = {
                field: getattr(patch, field)
                for field in _PATCHED_FIELDS
                if getattr(patch, field) is not None
            }
            updated = ContactRepository.update(existing.model_copy(update=changes))
        except sqlite3.Error as exc:
            logger.error("Error updating contact %s: %s", contact_id, exc)
            return ContactResult(
                ResultStatus.INTERNAL_ERROR, message=f"Error updating contact: {exc}"
            )
        logger.info("Updated contact %s (fields: %s)", contact_id, ", ".join(changes) or "none")
        return ContactResult(ResultStatus.OK, contact=updated)

    @classmethod
    async def search_contacts(
        cls, keyword: Optional[str], page_request: PageRequest
    ) -> ContactPage:
        """Case-insensitive substring search on the contact name."""
        if keyword is None or not keyword.strip():
            logger.warning("Rejected search with empty keyword")
            raise InvalidArgumentError("Search keyword must not be empty")
        keyword = keyword.strip()
        try:
            content, total = ContactRepository.find_by_name_containing(keyword, page_request)
        except sqlite3.Error as exc:
            logger.error("Error searching contacts for '%s': %s", keyword, exc)
            raise ContactServiceError(f"Error searching contacts: {exc}") from exc
        if total == 0:
            logger.info("No contacts found for keyword '%s'", keyword)
        else:
            logger.info("Found %s contacts for keyword '%s'", total, keyword)
        return ContactPage.build(content, page_request, total)

    @classmethod
    async def save_contact(cls, contact: Optional[ContactCreate]) -> ContactRead:
        """Insert a new contact, or overwrite the one with ``contact.id``."""
        if contact is None:
            logger.warning("Rejected save without contact data")
            raise InvalidArgumentError("Contact must not be null")
        if contact.id is not None and not _is_valid_id(contact.id):
            logger.warning("Rejected save with invalid contact ID %s", contact.id)
            raise InvalidArgumentError(f"Invalid contact ID: {contact.id}")
        try:
            saved = ContactRepository.save(contact)
        except sqlite3.Error as exc:
            logger.error("Error saving contact: %s", exc)
            raise ContactServiceError(f"Error saving contact: {exc}") from exc
        logger.info("Saved contact %s", saved.id)
        return saved
