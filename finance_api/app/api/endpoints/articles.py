"""
Article endpoints.

Finance articles are static content.  There are no write routes, so
repeated calls always return the same seeded list.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from finance_api.app.core.store import InMemoryStore, get_store
from finance_api.app.schemas.article import ArticleRead
from finance_api.app.services.article_service import ArticleService

router = APIRouter()


@router.get(
    "",
    response_model=None,
    summary="Ambil semua artikel tentang keuangan",
    responses={
        status.HTTP_200_OK: {
            "description": "Berhasil mengambil artikel",
            "model": List[ArticleRead],
        }
    },
)
async def list_articles(store: InMemoryStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await ArticleService.list_articles(store)
