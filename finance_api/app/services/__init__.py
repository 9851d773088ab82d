"""
Service layer abstraction.

Each service encapsulates the operations for a domain.  Services work
on the ``InMemoryStore`` they are given, so API handlers never touch
the store's collections directly.
"""
