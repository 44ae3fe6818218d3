"""
Pydantic models for contact data.

``ContactBase`` holds the four user supplied fields; ``ContactCreate``
extends it with the trimming and non‑empty rules applied to request
bodies, and ``ContactRead`` adds the store assigned ``id`` for
responses.  Field names use the camelCase spelling of the JSON wire
format.

Request bodies arrive as loosely typed dictionaries.  They are turned
into a ``ValidationResult`` by :func:`validate_contact_payload` so the
service layer can branch on an explicit outcome instead of catching
pydantic errors itself.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from contact_list_api.app.core.exceptions import (
    ContactAPIError,
    ContactValidationError,
    InvalidBodyError,
    InvalidEmailError,
)


CONTACT_FIELDS = ("firstName", "lastName", "email", "telephone")

# local@domain.tld: no whitespace, a single "@", and a dot after it.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactBase(BaseModel):
    firstName: str = Field(..., examples=["John"])
    lastName: str = Field(..., examples=["Doe"])
    email: str = Field(..., examples=["john.doe@example.com"])
    telephone: str = Field(..., examples=["+1234567890"])


class ContactCreate(ContactBase):
    """Schema for creating or fully replacing a contact.

    Every field must be a string that is not blank once surrounding
    whitespace is removed.  The stored value is the trimmed string.
    """

    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def strip_required(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("field is required")
        return value.strip()


class ContactRead(ContactBase):
    """Schema for reading a contact from the API."""

    id: int = Field(..., examples=[1])

    model_config = {
        "from_attributes": True,
    }


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


@dataclass
class ValidationResult:
    """Outcome of validating a request body.

    Exactly one of ``contact`` and ``error`` is set.
    """

    contact: Optional[ContactCreate] = None
    error: Optional[ContactAPIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_contact_payload(payload: Any, check_email: bool = False) -> ValidationResult:
    """Validate a raw request body against :class:`ContactCreate`.

    A body that is absent or not an object fails with
    :class:`InvalidBodyError`; missing, blank or non‑string fields fail
    with :class:`ContactValidationError`.  When ``check_email`` is set
    the trimmed e‑mail must also match :data:`EMAIL_PATTERN`.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return ValidationResult(error=InvalidBodyError())
    try:
        contact = ContactCreate.model_validate(payload)
    except ValidationError:
        return ValidationResult(error=ContactValidationError())
    if check_email and not is_valid_email(contact.email):
        return ValidationResult(error=InvalidEmailError())
    return ValidationResult(contact=contact)
