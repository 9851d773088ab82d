"""Service layer for the read-only article collection."""

from typing import Any, Dict, List

from finance_api.app.core.store import InMemoryStore


class ArticleService:
    @classmethod
    async def list_articles(cls, store: InMemoryStore) -> List[Dict[str, Any]]:
        """Return all articles in seed order."""
        return store.articles
