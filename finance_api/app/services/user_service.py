"""
Service layer for users.

Users are static seed data; the only operation is listing them.  The
records are returned exactly as stored, nested transactions and
password included.
"""

from typing import Any, Dict, List

from finance_api.app.core.store import InMemoryStore


class UserService:
    """Read access to the users held by a store."""

    @classmethod
    async def list_users(cls, store: InMemoryStore) -> List[Dict[str, Any]]:
        return store.users
