"""
Error taxonomy for the contact API.

Each exception carries the HTTP status code and the machine readable
``code`` used in error bodies.  Services raise these exceptions and
the handlers in ``core.responses`` turn them into JSON responses, so
API handlers never build error bodies themselves.
"""

from typing import Optional


class ContactAPIError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdError(ContactAPIError):
    status_code = 400
    code = "INVALID_ID"
    default_message = "Invalid contact ID"


class ContactValidationError(ContactAPIError):
    status_code = 400
    code = "MISSING_FIELDS"
    default_message = "All fields are required: firstName, lastName, email, telephone"


class InvalidEmailError(ContactAPIError):
    status_code = 400
    code = "INVALID_EMAIL"
    default_message = "Invalid email format"


class InvalidBodyError(ContactAPIError):
    status_code = 400
    code = "INVALID_BODY"
    default_message = "Request body must be a JSON object"


class ContactNotFoundError(ContactAPIError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Contact not found"
