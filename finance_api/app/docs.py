"""
API documentation generator.

The OpenAPI document is assembled once, when the application starts,
from the metadata attached to each route (summary, path parameter
descriptions, request body schemas and the documented responses) and
the static document information from ``Settings``.  The result is
cached on the application and served by FastAPI's built-in Swagger UI
page at ``settings.docs_url`` and as raw JSON at
``settings.openapi_url``.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from .core.config import settings

logger = logging.getLogger(__name__)


def build_openapi(app: FastAPI) -> Dict[str, Any]:
    """Build the OpenAPI document for ``app`` from its registered routes."""
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        servers=[{"url": settings.public_url}],
    )
    logger.info("Built API documentation with %d paths", len(schema.get("paths", {})))
    return schema


def install_openapi(app: FastAPI) -> None:
    """Replace ``app.openapi`` with a version that builds the document once.

    The first call builds the document; later calls, including the ones
    made by the docs routes, return the cached copy.
    """

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi(app)
        return app.openapi_schema

    app.openapi = openapi
