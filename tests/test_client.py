"""Tests for the requests based API client.

The client is exercised against a real application: a stub session
forwards each call to a FastAPI ``TestClient`` and converts the result
into a ``requests.Response``.
"""
from __future__ import annotations

from urllib.parse import urlsplit

import pytest
import requests

from contact_list_client import ContactListClient


class ForwardingSession:
    """Minimal stand-in for ``requests.Session`` backed by a TestClient."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, timeout))
        path = urlsplit(url).path
        result = self.test_client.request(method, path, json=json)
        response = requests.Response()
        response.status_code = result.status_code
        response._content = result.content
        response.reason = result.reason_phrase
        response.url = url
        return response


class FailingSession:
    def request(self, method, url, json=None, timeout=None):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(client):
    return ContactListClient(base_url="http://testserver/", session=ForwardingSession(client))


@pytest.fixture
def enveloped_api(make_client):
    return ContactListClient(
        base_url="http://testserver",
        session=ForwardingSession(make_client(use_envelope=True)),
    )


def test_base_url_is_normalised(api):
    assert api.base_url == "http://testserver"


def test_list_contacts(api):
    contacts, error = api.list_contacts()

    assert error is None
    assert [c["id"] for c in contacts] == [1, 2]


def test_create_then_get(api, new_contact):
    created, error = api.create_contact(new_contact)
    assert error is None

    fetched, error = api.get_contact(created["id"])

    assert error is None
    assert fetched == created


def test_update(api, new_contact):
    updated, error = api.update_contact(2, new_contact)

    assert error is None
    assert updated == {"id": 2, **new_contact}


def test_delete(api):
    assert api.delete_contact(1) == (True, None)

    ok, error = api.delete_contact(1)

    assert ok is False
    assert error["status_code"] == 404
    assert error["code"] == "NOT_FOUND"


def test_error_details(api):
    contact, error = api.create_contact({"firstName": "Only"})

    assert contact is None
    assert error == {
        "status_code": 400,
        "message": "All fields are required: firstName, lastName, email, telephone",
        "code": "MISSING_FIELDS",
    }


def test_envelope_is_unwrapped(enveloped_api, new_contact):
    contacts, error = enveloped_api.list_contacts()
    assert error is None
    assert [c["id"] for c in contacts] == [1, 2]

    created, _ = enveloped_api.create_contact(new_contact)
    assert created["id"] == 3


def test_envelope_errors(enveloped_api):
    _, error = enveloped_api.get_contact("abc")

    assert error["status_code"] == 400
    assert error["code"] == "INVALID_ID"
    assert error["message"] == "Invalid contact ID"


def test_health(api):
    assert api.health() is True


def test_connection_errors_are_reported():
    api = ContactListClient(session=FailingSession())

    contacts, error = api.list_contacts()

    assert contacts == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
    assert api.health() is False


def test_timeout_is_passed(api):
    api.list_contacts()

    assert api.session.calls[-1] == ("GET", "http://testserver/api/contacts", 15)
