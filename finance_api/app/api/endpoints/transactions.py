"""
Transaction endpoints.

Routes for listing, adding and editing the transactions of a user.
They are mounted under ``/users`` because transactions only exist
inside their owning user.  Missing users and transactions are
reported with :class:`NotFoundError`, which the application renders
as a plain-text 404.

Path ids are read with ``parse_id`` rather than validated by FastAPI, so
an id such as ``abc`` is simply a miss (404) and ``1abc`` means ``1``.
Request bodies are not validated either: the fields sent by the client
are stored as they are.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, status

from finance_api.app.core.errors import TRANSACTION_NOT_FOUND, USER_NOT_FOUND, NotFoundError
from finance_api.app.core.store import InMemoryStore, get_store, parse_id
from finance_api.app.schemas.transaction import (
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from finance_api.app.services.transaction_service import TransactionService

router = APIRouter()

# Ids arrive as raw strings; the docs still advertise them as integers.
_USER_ID = {"description": "ID pengguna", "json_schema_extra": {"type": "integer"}}
_TRANSACTION_ID = {"description": "ID transaksi", "json_schema_extra": {"type": "integer"}}

_USER_MISSING = {
    status.HTTP_404_NOT_FOUND: {
        "description": USER_NOT_FOUND,
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}


@router.get(
    "/{id}/transactions",
    response_model=None,
    summary="Ambil semua transaksi pengguna",
    responses={
        status.HTTP_200_OK: {
            "description": "Berhasil mengambil data transaksi",
            "model": List[TransactionRead],
        },
        **_USER_MISSING,
    },
)
async def list_transactions(
    user_id: str = Path(..., alias="id", **_USER_ID),
    store: InMemoryStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    transactions = await TransactionService.list_transactions(store, parse_id(user_id))
    if transactions is None:
        raise NotFoundError(USER_NOT_FOUND)
    return transactions


@router.post(
    "/{id}/transactions",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    summary="Tambah transaksi baru untuk pengguna",
    responses={
        status.HTTP_201_CREATED: {
            "description": "Transaksi berhasil ditambahkan",
            "model": TransactionRead,
        },
        **_USER_MISSING,
    },
)
async def add_transaction(
    user_id: str = Path(..., alias="id", **_USER_ID),
    transaction_in: Optional[TransactionCreate] = None,
    store: InMemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Append a transaction; its id is the user's transaction count plus one."""
    transaction = await TransactionService.add_transaction(
        store, parse_id(user_id), transaction_in
    )
    if transaction is None:
        raise NotFoundError(USER_NOT_FOUND)
    return transaction


@router.put(
    "/{userId}/transactions/{transactionId}",
    response_model=None,
    summary="Edit transaksi pengguna",
    responses={
        status.HTTP_200_OK: {
            "description": "Transaksi berhasil diperbarui",
            "model": TransactionRead,
        },
        status.HTTP_404_NOT_FOUND: {
            "description": f"{USER_NOT_FOUND} / {TRANSACTION_NOT_FOUND}",
            "content": {"text/plain": {"schema": {"type": "string"}}},
        },
    },
)
async def update_transaction(
    user_id: str = Path(..., alias="userId", **_USER_ID),
    transaction_id: str = Path(..., alias="transactionId", **_TRANSACTION_ID),
    transaction_in: Optional[TransactionUpdate] = None,
    store: InMemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Overwrite only the fields present in the body; the rest stay as they are."""
    uid = parse_id(user_id)
    if store.find_user(uid) is None:
        raise NotFoundError(USER_NOT_FOUND)
    transaction = await TransactionService.update_transaction(
        store, uid, parse_id(transaction_id), transaction_in
    )
    if transaction is None:
        raise NotFoundError(TRANSACTION_NOT_FOUND)
    return transaction
