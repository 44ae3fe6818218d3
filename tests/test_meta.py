"""Tests for the root description and health check."""
from __future__ import annotations


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_lists_endpoints(client):
    body = client.get("/").json()

    assert body["message"] == "Contact List API"
    assert "POST /api/contacts" in body["endpoints"]
    assert "DELETE /api/contacts/:id" in body["endpoints"]


def test_health_is_never_wrapped(make_client):
    client = make_client(use_envelope=True)

    assert client.get("/health").json() == {"status": "ok"}


def test_openapi_documents_both_response_formats(client):
    schema = client.get("/openapi.json").json()

    get_item = schema["paths"]["/api/contacts/{contact_id}"]["get"]
    ok_examples = get_item["responses"]["200"]["content"]["application/json"]["examples"]
    assert ok_examples["bare"]["value"]["id"] == 1
    assert ok_examples["envelope"]["value"]["success"] is True
    assert "404" in get_item["responses"]
    assert "204" in schema["paths"]["/api/contacts/{contact_id}"]["delete"]["responses"]
