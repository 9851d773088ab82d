"""
User endpoints.

Users are read-only seed data.  The list is returned verbatim, with
the nested transactions and the stored password.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from finance_api.app.core.store import InMemoryStore, get_store
from finance_api.app.schemas.user import UserRead
from finance_api.app.services.user_service import UserService

router = APIRouter()


@router.get(
    "",
    response_model=None,
    summary="Ambil semua data pengguna",
    responses={
        status.HTTP_200_OK: {
            "description": "Berhasil mengambil data pengguna",
            "model": List[UserRead],
        }
    },
)
async def list_users(store: InMemoryStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await UserService.list_users(store)
