"""Shared fixtures: a fresh application and test client per test."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from contact_list_api.app.core.config import Settings
from contact_list_api.app.main import create_app


def build_settings(**overrides) -> Settings:
    values = {
        "strict_ids": True,
        "validate_email": False,
        "use_envelope": False,
        "seed_contacts": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_client():
    """Return a factory building a TestClient for the given settings."""

    def _make(raise_server_exceptions: bool = True, **overrides) -> TestClient:
        app = create_app(build_settings(**overrides))
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def new_contact():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "telephone": "+441234567",
    }
