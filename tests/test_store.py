"""Tests for the in-memory contact store."""
from __future__ import annotations

import pytest

from contact_list_api.app.core.store import ContactStore
from contact_list_api.app.schemas.contact import ContactCreate


@pytest.fixture
def fields():
    return ContactCreate(
        firstName="Alan",
        lastName="Turing",
        email="alan@example.com",
        telephone="0161",
    )


class TestContactStore:
    def test_seeded_state(self):
        store = ContactStore()

        assert len(store) == 2
        assert [c.id for c in store.all()] == [1, 2]
        assert store.next_id == 3

    def test_unseeded_state(self):
        store = ContactStore(seed=False)

        assert len(store) == 0
        assert store.next_id == 1

    def test_add_appends_with_sequential_ids(self, fields):
        store = ContactStore()

        first = store.add(fields)
        second = store.add(fields)

        assert (first.id, second.id) == (3, 4)
        assert store.all()[-1] == second

    def test_all_returns_a_copy(self):
        store = ContactStore()

        store.all().clear()

        assert len(store) == 2

    def test_find(self):
        store = ContactStore()

        assert store.find(1).firstName == "John"
        assert store.find(99) is None

    def test_replace_keeps_id_and_position(self, fields):
        store = ContactStore()

        updated = store.replace(1, fields)

        assert updated.id == 1
        assert store.all()[0] == updated
        assert store.all()[0].lastName == "Turing"

    def test_replace_unknown(self, fields):
        assert ContactStore().replace(42, fields) is None

    def test_remove(self):
        store = ContactStore()

        assert store.remove(1) is True
        assert store.remove(1) is False
        assert [c.id for c in store.all()] == [2]

    def test_ids_never_reused(self, fields):
        store = ContactStore()
        created = store.add(fields)
        store.remove(created.id)

        assert store.add(fields).id == created.id + 1

    def test_reset_restores_seed(self, fields):
        store = ContactStore()
        store.add(fields)
        store.remove(1)

        store.reset()

        assert [c.id for c in store.all()] == [1, 2]
        assert store.next_id == 3
