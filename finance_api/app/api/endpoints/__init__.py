"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one domain
(users, transactions, articles).  The routers are aggregated in
``api/router.py`` and then included in the main application.
"""
