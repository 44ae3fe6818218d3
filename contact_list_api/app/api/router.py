"""
Top‑level router for the API.

Aggregates the domain routers: the service description and health
check live at the root, contacts under ``/api/contacts``.
"""

from fastapi import APIRouter

from .endpoints import contacts, meta

router = APIRouter()

router.include_router(meta.router, tags=["meta"])
router.include_router(contacts.router, prefix="/api/contacts", tags=["contacts"])
