"""
Contact endpoints.

These routes provide CRUD operations for contacts kept in memory.
The ``contact_id`` path parameter is received as a string so that the
service can decide how malformed identifiers are reported (HTTP 400
with strict id checking, HTTP 404 otherwise).  Failures are raised as
``ContactAPIError`` subclasses and rendered by the application's
exception handlers.

Handlers return ``JSONResponse`` objects built by ``core.responses``
because the body shape depends on ``Settings.use_envelope``; the
possible shapes are described through ``responses`` for OpenAPI.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse

from contact_list_api.app.api.deps import get_contact_service, get_settings
from contact_list_api.app.core.config import Settings
from contact_list_api.app.core.responses import render
from contact_list_api.app.services.contact_service import ContactService

router = APIRouter()

_CONTACT_EXAMPLE: Dict[str, Any] = {
    "id": 1,
    "firstName": "John",
    "lastName": "Doe",
    "email": "john.doe@example.com",
    "telephone": "+1234567890",
}

_ERROR_EXAMPLES: Dict[str, Any] = {
    "bare": {"value": {"error": "Contact not found", "code": "NOT_FOUND"}},
    "envelope": {
        "value": {"success": False, "error": {"message": "Contact not found", "code": "NOT_FOUND"}}
    },
}


def _described(description: str, example: Any) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {
            "application/json": {
                "examples": {
                    "bare": {"value": example},
                    "envelope": {"value": {"success": True, "data": example}},
                }
            }
        },
    }


def _failure(description: str) -> Dict[str, Any]:
    return {"description": description, "content": {"application/json": {"examples": _ERROR_EXAMPLES}}}


_BAD_REQUEST = {400: _failure("INVALID_ID, MISSING_FIELDS, INVALID_EMAIL or INVALID_BODY")}
_NOT_FOUND = {404: _failure("NOT_FOUND")}


@router.get("", responses={200: _described("All contacts", [_CONTACT_EXAMPLE])})
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return every contact in insertion order."""
    return render(settings, service.list_contacts())


@router.get(
    "/{contact_id}",
    responses={200: _described("The contact", _CONTACT_EXAMPLE), **_BAD_REQUEST, **_NOT_FOUND},
)
async def get_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Retrieve a single contact by its ID.

    Returns HTTP 404 if the contact does not exist and HTTP 400 for an
    identifier that is not a positive integer when strict ids are on.
    """
    return render(settings, service.get_contact(contact_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: _described("The created contact", _CONTACT_EXAMPLE), **_BAD_REQUEST},
)
async def create_contact(
    payload: Any = Body(None),
    service: ContactService = Depends(get_contact_service),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Create a contact.

    All of ``firstName``, ``lastName``, ``email`` and ``telephone`` are
    required and trimmed before storing.  The new contact receives the
    next sequential id.
    """
    contact = service.create_contact(payload)
    return render(settings, contact, status.HTTP_201_CREATED)


# Any well-formed JSON reaches the service, which checks the body only
# after the id format and existence checks.
@router.put(
    "/{contact_id}",
    responses={200: _described("The updated contact", _CONTACT_EXAMPLE), **_BAD_REQUEST, **_NOT_FOUND},
)
async def update_contact(
    contact_id: str,
    payload: Any = Body(None),
    service: ContactService = Depends(get_contact_service),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Replace every field of an existing contact except its id."""
    return render(settings, service.update_contact(contact_id, payload))


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Delete a contact.  The response has no body."""
    service.delete_contact(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
