"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, storage, errors), ``schemas``
(pydantic models), ``services`` (business logic) and ``api`` (routers).
"""

from .main import app, create_app  # noqa: F401
