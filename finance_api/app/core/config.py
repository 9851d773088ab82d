"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults reproduce the fixed values the
service has always shipped with (port 8080, documentation under
``/api-docs``), so running without any environment set up gives the
documented behaviour.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "API Manajemen Keuangan")
    description: str = os.getenv(
        "API_DESCRIPTION", "API untuk mengelola pemasukan dan pengeluaran"
    )
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address uvicorn binds to.  ``public_url`` is what gets logged at
    # startup and advertised in the ``servers`` block of the OpenAPI
    # document, since ``0.0.0.0`` is not something a browser can open.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    public_url: str = os.getenv("PUBLIC_URL", "http://localhost:8080")

    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    @property
    def openapi_url(self) -> str:
        """Path of the raw OpenAPI document, served next to the docs page."""
        return f"{self.docs_url.rstrip('/')}/openapi.json"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
