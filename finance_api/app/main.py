"""
Main entrypoint for the Finance API.

This module assembles the FastAPI application: it sets up logging,
attaches the in-memory store, includes the routers, registers the
plain-text 404 handler and installs the documentation generator.  The
``create_app`` function builds the app, which is then instantiated at
module import time as ``app``, so it can be served with uvicorn::

    uvicorn finance_api.app.main:app --port 8080

The documentation is available at ``/api-docs``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .core.store import InMemoryStore
from .docs import install_openapi

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Generate the documentation up front so that the first visitor of
    # the docs page does not pay for it.
    app.openapi()
    logger.info(
        "Loaded %d users and %d articles",
        len(app.state.store.users),
        len(app.state.store.articles),
    )
    yield


def create_app(store: Optional[InMemoryStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[InMemoryStore]
        Data store the handlers operate on.  A freshly seeded store is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup steps
    # below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        description=settings.description,
        version=settings.api_version,
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else InMemoryStore()

    app.include_router(api_router)
    register_error_handlers(app)
    install_openapi(app)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
