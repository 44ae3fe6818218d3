"""
In‑memory storage for contact records.

``ContactStore`` owns the ordered list of contacts and the counter
used to assign identifiers.  Nothing is persisted: a new store starts
from the two sample records, and restarting the process resets the
data.  Identifiers increase monotonically and are never reused, even
after the contact holding the highest id is deleted.

One store is created per application by ``create_app`` and kept on
``app.state``; handlers reach it through ``ContactService``.
"""

from typing import Dict, List, Optional

from contact_list_api.app.schemas.contact import ContactCreate, ContactRead


SEED_CONTACTS: List[Dict[str, str]] = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "telephone": "+1234567890",
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@example.com",
        "telephone": "+0987654321",
    },
]


class ContactStore:
    """Ordered collection of contacts with a sequential id counter."""

    def __init__(self, seed: bool = True) -> None:
        self._seed = seed
        self._contacts: List[ContactRead] = []
        self._next_id = 1
        self.reset()

    def reset(self) -> None:
        """Drop all records and restore the initial state."""
        self._contacts = []
        self._next_id = 1
        if self._seed:
            for data in SEED_CONTACTS:
                self.add(ContactCreate(**data))

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._contacts)

    def all(self) -> List[ContactRead]:
        return list(self._contacts)

    def find(self, contact_id: int) -> Optional[ContactRead]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def add(self, fields: ContactCreate) -> ContactRead:
        contact = ContactRead(id=self._next_id, **fields.model_dump())
        self._next_id += 1
        self._contacts.append(contact)
        return contact

    def replace(self, contact_id: int, fields: ContactCreate) -> Optional[ContactRead]:
        """Replace every field except ``id``, keeping the record's position."""
        for index, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                updated = ContactRead(id=contact_id, **fields.model_dump())
                self._contacts[index] = updated
                return updated
        return None

    def remove(self, contact_id: int) -> bool:
        for index, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                del self._contacts[index]
                return True
        return False
