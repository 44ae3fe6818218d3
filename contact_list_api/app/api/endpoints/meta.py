"""
Service description and health check.

These routes are mounted at the application root.  Their bodies are
never wrapped in the response envelope.
"""

from typing import Any, Dict

from fastapi import APIRouter

router = APIRouter()

ENDPOINTS: Dict[str, str] = {
    "GET /health": "Health check endpoint",
    "GET /api/contacts": "Get all contacts",
    "GET /api/contacts/:id": "Get a contact by ID",
    "POST /api/contacts": "Create a new contact",
    "PUT /api/contacts/:id": "Update a contact",
    "DELETE /api/contacts/:id": "Delete a contact",
}


@router.get("/")
async def root() -> Dict[str, Any]:
    """Describe the service and list its endpoints."""
    return {"message": "Contact List API", "endpoints": ENDPOINTS}


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}
