"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors and the in-memory
store), ``schemas`` (pydantic models), ``services`` (operations on the
store) and ``api`` (the routers).  The documentation generator lives
in ``docs``.
"""

from .main import app  # noqa: F401
