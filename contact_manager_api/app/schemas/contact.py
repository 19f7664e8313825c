"""
Pydantic schemas for contacts.

A contact has a name, an email, an optional free-form address, a
telephone number and a postal address.  Fields are exposed in JSON
with camelCase names (``telephoneNumber``, ``postalAddress``); the
snake_case attribute names are accepted on input as well.

Field rules are checked by :func:`contact_violations` rather than by
pydantic so that every offending field can be reported at once with
a human readable message.
"""

import math
import re
from typing import List, Optional, Tuple

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TELEPHONE_PATTERN = re.compile(r"\+?[0-9 .()-]{7,15}")
NAME_MAX_LENGTH = 100
POSTAL_ADDRESS_MAX_LENGTH = 255


class ContactSchema(BaseModel):
    """Base class wiring camelCase aliases for every contact schema."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContactCreate(ContactSchema):
    """Schema for the request body of create and update calls.

    Every field is nullable at parse time; required-ness is enforced by
    :func:`contact_violations`.  A client supplied ``id`` is accepted so
    that a create call can overwrite an existing row.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    telephone_number: Optional[str] = None
    postal_address: Optional[str] = None

    def to_patch(self) -> "ContactPatch":
        return ContactPatch(
            name=self.name,
            email=self.email,
            telephone_number=self.telephone_number,
            postal_address=self.postal_address,
        )


class ContactPatch(ContactSchema):
    """Changes applied by an update.

    ``None`` always means "leave the stored value unchanged"; an update
    cannot clear a field.  ``address`` is not part of the patch.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    telephone_number: Optional[str] = None
    postal_address: Optional[str] = None


class ContactRead(ContactSchema):
    """Schema for reading a persisted contact."""

    id: int
    name: str
    email: str
    address: Optional[str] = None
    telephone_number: str
    postal_address: str


class PageRequest(BaseModel):
    """Page index, page size and sort order of a paginated query."""

    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1)
    sort: str = "id ASC"

    @property
    def offset(self) -> int:
        return self.page * self.size


class ContactPage(ContactSchema):
    """A slice of contacts plus pagination metadata."""

    content: List[ContactRead]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def build(
        cls, content: List[ContactRead], page_request: PageRequest, total: int
    ) -> "ContactPage":
        total_pages = math.ceil(total / page_request.size) if total else 0
        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            number=page_request.page,
            size=page_request.size,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=not content,
        )


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def contact_violations(contact: ContactCreate) -> List[Tuple[str, str]]:
    """Return ``(field, message)`` pairs for every rule the contact breaks.

    Field names are the JSON (camelCase) names.  An empty list means the
    contact is valid.
    """
    violations: List[Tuple[str, str]] = []

    if contact.id is not None and contact.id <= 0:
        violations.append(("id", "Id must be a positive number"))

    if _is_blank(contact.name):
        violations.append(("name", "Name is required"))
    elif len(contact.name) > NAME_MAX_LENGTH:
        violations.append(("name", "Name must be less than 100 characters"))

    if _is_blank(contact.email):
        violations.append(("email", "Email is required"))
    elif not _is_valid_email(contact.email):
        violations.append(("email", "Email should be valid"))

    if _is_blank(contact.telephone_number):
        violations.append(("telephoneNumber", "Telephone number is required"))
    elif not TELEPHONE_PATTERN.fullmatch(contact.telephone_number):
        violations.append(("telephoneNumber", "Telephone number is invalid"))

    if _is_blank(contact.postal_address):
        violations.append(("postalAddress", "Postal address is required"))
    elif len(contact.postal_address) > POSTAL_ADDRESS_MAX_LENGTH:
        violations.append(
            ("postalAddress", "Postal address must be less than 255 characters")
        )

    return violations
