"""
Service layer for transactions.

Transactions live inside their owning user's record.  This module
provides the three operations the API exposes on them: listing,
appending and merge-updating.  No validation is performed on the
values being stored; a field present in the request simply replaces
the stored value.

Lookups return ``None`` when the user or transaction does not exist
(logged as a warning) and leave it to the API layer to turn that into a
404.  An id of ``None`` comes from a path segment that holds no number
and never matches.
"""

import logging
from typing import Any, Dict, List, Optional

from finance_api.app.core.store import InMemoryStore
from finance_api.app.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)


class TransactionService:
    """Operations on the transactions nested in a store's users."""

    @classmethod
    async def list_transactions(
        cls, store: InMemoryStore, user_id: Optional[int]
    ) -> Optional[List[Dict[str, Any]]]:
        """Return the user's transactions in insertion order, or ``None``."""
        user = store.find_user(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            return None
        return user["transactions"]

    @classmethod
    async def add_transaction(
        cls, store: InMemoryStore, user_id: Optional[int], data: Optional[TransactionCreate]
    ) -> Optional[Dict[str, Any]]:
        """Append a new transaction to the user and return it.

        The new id is the current number of transactions plus one.  The
        request fields are applied on top of it, so a body carrying its
        own ``id`` wins.  Returns ``None`` if the user does not exist.
        """
        user = store.find_user(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            return None
        with store.lock:
            transaction: Dict[str, Any] = {"id": len(user["transactions"]) + 1}
            if data is not None:
                transaction.update(data.changes())
            user["transactions"].append(transaction)
        logger.info("Created transaction %s for user %s", transaction.get("id"), user_id)
        return transaction

    @classmethod
    async def update_transaction(
        cls,
        store: InMemoryStore,
        user_id: Optional[int],
        transaction_id: Optional[int],
        data: Optional[TransactionUpdate],
    ) -> Optional[Dict[str, Any]]:
        """Merge the provided fields into an existing transaction.

        Fields absent from ``data`` keep their stored value.  The caller
        is expected to have checked that the user exists; ``None`` is
        returned when either the user or the transaction is missing.
        """
        user = store.find_user(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            return None
        transaction = store.find_transaction(user, transaction_id)
        if transaction is None:
            logger.warning("Transaction %s of user %s not found", transaction_id, user_id)
            return None
        changes = data.changes() if data is not None else {}
        with store.lock:
            transaction.update(changes)
        logger.info(
            "Updated transaction %s for user %s (%s)",
            transaction_id,
            user_id,
            ", ".join(changes) or "no fields",
        )
        return transaction
