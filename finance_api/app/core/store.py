"""
In-memory data store.

All state of the service lives in an ``InMemoryStore``: a list of users,
each carrying its own ordered list of transactions, and a list of
articles.  Nothing is persisted; the seed data below is loaded every
time a store is created and discarded when the process exits.

Records are kept as plain dictionaries.  Updates merge whatever the
client sent into the stored dictionary without coercion, so a record
may legitimately hold values of unexpected types after an update.

The store belongs to the application (``app.state.store``) and reaches
the handlers through the ``get_store`` dependency, which lets tests
build a fresh store per application instance.
"""

import copy
import re
import threading
from typing import Any, Dict, List, Optional

from fastapi import Request

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_id(raw: str) -> Optional[int]:
    """Read a record id from a path segment the way ``parseInt`` does.

    Leading whitespace and a sign are allowed, a ``0x`` prefix switches
    to hexadecimal, and parsing stops at the first character that is not
    a digit, so ``"1abc"`` gives ``1``.  Returns ``None`` when no digits
    lead the string; such an id matches no record.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


SEED_USERS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Heru",
        "email": "123@gmail.com",
        "password": "pass",
        "gender": "Laki-laki",
        "phone": "089123456789",
        "transactions": [
            {"id": 1, "type": "income", "amount": 500000, "description": "Gaji"},
            {"id": 2, "type": "expense", "amount": 200000, "description": "Belanja"},
        ],
    },
]

SEED_ARTICLES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "Tips Mengatur Keuangan Pribadi",
        "content": "Pelajari cara mengelola keuangan Anda dengan bijak.",
    },
    {
        "id": 2,
        "title": "Investasi untuk Pemula",
        "content": "Langkah awal untuk memulai investasi yang aman.",
    },
]


class InMemoryStore:
    """Process-lifetime container for users, transactions and articles."""

    def __init__(
        self,
        users: Optional[List[Dict[str, Any]]] = None,
        articles: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        # Deep copies so that stores never share records with the seed
        # constants or with each other.
        self.users: List[Dict[str, Any]] = copy.deepcopy(SEED_USERS if users is None else users)
        self.articles: List[Dict[str, Any]] = copy.deepcopy(
            SEED_ARTICLES if articles is None else articles
        )
        # Held around appends and merges.  Async handlers already run one
        # at a time on the event loop; the lock covers threaded servers.
        self.lock = threading.Lock()

    def find_user(self, user_id: Optional[int]) -> Optional[Dict[str, Any]]:
        """Return the first user whose ``id`` equals ``user_id``."""
        if user_id is None:
            return None
        for user in self.users:
            if user.get("id") == user_id:
                return user
        return None

    @staticmethod
    def find_transaction(
        user: Dict[str, Any], transaction_id: Optional[int]
    ) -> Optional[Dict[str, Any]]:
        """Return the first transaction of ``user`` with the given ``id``."""
        if transaction_id is None:
            return None
        for transaction in user["transactions"]:
            if transaction.get("id") == transaction_id:
                return transaction
        return None


def get_store(request: Request) -> InMemoryStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.store
