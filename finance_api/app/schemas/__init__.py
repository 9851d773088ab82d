"""
Pydantic schema definitions for API payloads.

Each domain (users, transactions, articles) defines its own models for
request and response bodies.  Response models document the stored
records; request models describe partial transaction updates.
"""
