"""Contact List API client.

This module defines a small client wrapper around the Contact List
HTTP API.  The client uses the ``requests`` library internally and
exposes one method per endpoint:

* :meth:`ContactListClient.list_contacts` – return all contacts.
* :meth:`ContactListClient.get_contact` – fetch a single contact.
* :meth:`ContactListClient.create_contact` – add a contact.
* :meth:`ContactListClient.update_contact` – replace a contact's fields.
* :meth:`ContactListClient.delete_contact` – remove a contact.
* :meth:`ContactListClient.health` – query the health endpoint.

Every method returns a tuple ``(data, error)`` and never raises for
HTTP or connection failures.  The server may be configured to wrap
responses in a ``{"success": ..., "data": ...}`` envelope; the client
unwraps both formats transparently.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ContactListClient:
    """Client for interacting with the Contact List API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _unwrap(payload: Any) -> Any:
        if isinstance(payload, dict) and "success" in payload and "data" in payload:
            return payload["data"]
        return payload

    @staticmethod
    def _error_from_response(response: requests.Response) -> Error:
        message = ""
        code = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            err = body.get("error")
            if isinstance(err, dict):
                # envelope format
                message = err.get("message") or ""
                code = err.get("code")
            else:
                message = err or body.get("detail") or ""
                code = body.get("code")
        if not message:
            message = response.text or response.reason or ""
        return {"status_code": response.status_code, "message": message, "code": code}

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed and
            unwrapped JSON response on success (``None`` for empty
            bodies) and ``error`` is ``None``.  On failure ``data`` is
            ``None`` and ``error`` has the keys ``status_code``,
            ``message`` and ``code``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "code": None}
        if not response.ok:
            error = self._error_from_response(response)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        if not response.content:
            return None, None
        try:
            return self._unwrap(response.json()), None
        except ValueError as exc:
            logger.error("Invalid JSON in response from %s: %s", url, exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response", "code": None}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all contacts.

        Returns:
            A tuple ``(contacts, error)``.  ``contacts`` is empty on failure.
        """
        data, error = self._request("GET", "/api/contacts")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_contact(self, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/contacts/{contact_id}")

    def create_contact(self, contact: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a contact from a dict with ``firstName``, ``lastName``,
        ``email`` and ``telephone``."""
        return self._request("POST", "/api/contacts", json_body=contact)

    def update_contact(
        self, contact_id: Any, contact: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/api/contacts/{contact_id}", json_body=contact)

    def delete_contact(self, contact_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a contact.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/api/contacts/{contact_id}")
        return error is None, error

    def health(self) -> bool:
        data, error = self._request("GET", "/health")
        return error is None and isinstance(data, dict) and data.get("status") == "ok"
