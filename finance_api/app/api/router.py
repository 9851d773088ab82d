"""
Top-level API router.

Aggregates the domain routers.  Transactions are nested resources of a
user, so their router shares the ``/users`` prefix with the user
router.
"""

from fastapi import APIRouter

from .endpoints import articles, transactions, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(transactions.router, prefix="/users", tags=["transactions"])
router.include_router(articles.router, prefix="/articles", tags=["articles"])
