"""
Contact endpoints.

CRUD and search routes for contacts, mounted under ``/api/contact``.
Request bodies are checked with ``contact_violations`` before the
service runs; any violation short-circuits to a 400 response.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse

from contact_manager_api.app.core.config import settings
from contact_manager_api.app.core.errors import ContactValidationError
from contact_manager_api.app.schemas.contact import (
    ContactCreate,
    ContactPage,
    ContactRead,
    PageRequest,
    contact_violations,
)
from contact_manager_api.app.services.contact_service import (
    ContactResult,
    ContactService,
    ResultStatus,
)

router = APIRouter()

# Largest page index whose row offset still fits a signed 64-bit SQLite integer.
MAX_PAGE_INDEX = (2**63 - 1) // settings.max_page_size


def page_request(
    page: int = Query(0, ge=0, le=MAX_PAGE_INDEX, description="Zero-based page index"),
    size: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Number of contacts per page",
    ),
) -> PageRequest:
    return PageRequest(page=page, size=size)


def valid_contact(contact: ContactCreate) -> ContactCreate:
    """Dependency rejecting bodies that break a field rule."""
    violations = contact_violations(contact)
    if violations:
        raise ContactValidationError(violations)
    return contact


def _to_response(result: ContactResult) -> Response:
    """Map a service result onto an HTTP response."""
    if result.status is ResultStatus.OK:
        return Response(
            content=result.contact.model_dump_json(by_alias=True),
            media_type="application/json",
        )
    if result.status is ResultStatus.NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    headers = None
    if result.status is ResultStatus.NOT_FOUND:
        headers = {"X-Error-Message": result.message}
    return PlainTextResponse(
        result.message or "", status_code=result.status_code, headers=headers
    )


@router.get("", response_model=ContactPage)
async def list_contacts(paging: PageRequest = Depends(page_request)) -> ContactPage:
    """Return a page of all contacts ordered by id."""
    return await ContactService.list_contacts(paging)


@router.post("", response_model=ContactRead)
async def save_contact(contact: ContactCreate = Depends(valid_contact)) -> ContactRead:
    """Create a contact (or overwrite the one whose ``id`` is given)."""
    return await ContactService.save_contact(contact)


@router.get("/search", response_model=ContactPage)
async def search_contacts(
    search_keyword: str = Query(..., alias="searchKeyword"),
    paging: PageRequest = Depends(page_request),
) -> ContactPage:
    """Search contacts whose name contains the keyword, ignoring case.

    Returns an empty page when nothing matches and 400 when the
    keyword is blank.
    """
    return await ContactService.search_contacts(search_keyword, paging)


@router.get(
    "/{contact_id}",
    response_model=ContactRead,
    responses={400: {"description": "Invalid id"}, 404: {"description": "Contact not found"}},
)
async def get_contact(contact_id: int) -> Response:
    result = await ContactService.get_contact(contact_id)
    return _to_response(result)


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"description": "Invalid id"}, 404: {"description": "Contact not found"}},
)
async def delete_contact(contact_id: int) -> Response:
    result = await ContactService.delete_contact(contact_id)
    return _to_response(result)


@router.put(
    "/{contact_id}",
    response_model=ContactRead,
    responses={400: {"description": "Invalid id or body"}, 404: {"description": "Contact not found"}},
)
async def update_contact(
    contact_id: int, contact: ContactCreate = Depends(valid_contact)
) -> Response:
    """Update the name, email, telephone number and postal address of a contact."""
    result = await ContactService.update_contact(contact_id, contact.to_patch())
    return _to_response(result)
