"""
FastAPI dependencies shared by the endpoint modules.

The store and service are created by ``create_app`` and stored on
``app.state``; these helpers hand them to route functions so no
handler touches module level state.
"""

from fastapi import Request

from contact_list_api.app.core.config import Settings
from contact_list_api.app.services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
