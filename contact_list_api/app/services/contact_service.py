"""
Service layer for contacts.

``ContactService`` implements the five contact operations on top of a
``ContactStore``.  It parses path identifiers, validates request
bodies and raises the exceptions from ``core.exceptions`` on failure;
rendering those failures as HTTP responses is left to the handlers
registered by ``create_app``.

Checks are applied in a fixed order for operations addressing a
single record: identifier format first, then existence, then the body.
A request that fails any check leaves the store untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional

from contact_list_api.app.core.config import Settings
from contact_list_api.app.core.exceptions import ContactNotFoundError, InvalidIdError
from contact_list_api.app.core.store import ContactStore
from contact_list_api.app.schemas.contact import ContactCreate, ContactRead, validate_contact_payload


logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


class ContactService:
    """Business logic for the contact collection."""

    def __init__(self, store: ContactStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def parse_id(self, raw_id: str) -> Optional[int]:
        """Convert a path token into a contact id.

        With ``strict_ids`` enabled anything other than a positive
        decimal integer raises :class:`InvalidIdError`.  Otherwise a
        token that cannot be parsed yields ``None``, which matches no
        record.
        """
        if self.settings.strict_ids:
            if not _DIGITS.fullmatch(raw_id) or int(raw_id) < 1:
                raise InvalidIdError()
            return int(raw_id)
        try:
            return int(raw_id)
        except ValueError:
            return None

    def _require(self, raw_id: str) -> ContactRead:
        contact_id = self.parse_id(raw_id)
        contact = self.store.find(contact_id) if contact_id is not None else None
        if contact is None:
            raise ContactNotFoundError()
        return contact

    def _validated(self, payload: Any) -> ContactCreate:
        result = validate_contact_payload(payload, check_email=self.settings.validate_email)
        if not result.ok:
            logger.debug("Rejected contact payload: %s", result.error.code)
            raise result.error
        return result.contact

    def list_contacts(self) -> List[ContactRead]:
        return self.store.all()

    def get_contact(self, raw_id: str) -> ContactRead:
        return self._require(raw_id)

    def create_contact(self, payload: Any) -> ContactRead:
        fields = self._validated(payload)
        contact = self.store.add(fields)
        logger.info("Created contact %s", contact.id)
        return contact

    def update_contact(self, raw_id: str, payload: Any) -> ContactRead:
        existing = self._require(raw_id)
        fields = self._validated(payload)
        contact = self.store.replace(existing.id, fields)
        logger.info("Updated contact %s", existing.id)
        return contact

    def delete_contact(self, raw_id: str) -> None:
        existing = self._require(raw_id)
        self.store.remove(existing.id)
        logger.info("Deleted contact %s", existing.id)
