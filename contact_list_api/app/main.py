"""
Main entrypoint for the Contact List API.

This module assembles the FastAPI application, sets up logging,
creates the contact store and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn contact_list_api.app.main:app --port 3000
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.responses import register_exception_handlers, register_request_logging
from .core.store import ContactStore
from .services.contact_service import ContactService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call returns an independent application with its own store,
    seeded according to ``settings.seed_contacts``.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment when ``core.config`` was imported.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    store = ContactStore(seed=settings.seed_contacts)
    app.state.settings = settings
    app.state.contact_store = store
    app.state.contact_service = ContactService(store, settings)

    register_exception_handlers(app, settings)
    register_request_logging(app)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
