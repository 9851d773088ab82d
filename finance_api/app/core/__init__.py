"""
Core infrastructure: settings, logging setup, error rendering and the
in-memory data store shared by all routes.
"""
