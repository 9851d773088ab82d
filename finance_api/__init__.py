"""
Top-level package for the Finance API.

This file makes ``finance_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``finance_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
