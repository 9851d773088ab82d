"""Finance API client.

A small wrapper around the REST API served by ``finance_api``.  The
client can read the server's OpenAPI document (``/api-docs/openapi.json``)
to discover the paths of the operations it needs.  Operations are
matched by tag (``users``, ``transactions``, ``articles``) and HTTP
method.  When the document is unavailable, or does not describe an
operation, the conventional paths are used instead:

* :meth:`list_users` – ``GET /users``
* :meth:`list_transactions` – ``GET /users/{id}/transactions``
* :meth:`add_transaction` – ``POST /users/{id}/transactions``
* :meth:`update_transaction` – ``PUT /users/{userId}/transactions/{transactionId}``
* :meth:`list_articles` – ``GET /articles``

Every operation returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message``.  The server reports missing users
and transactions as plain text, which ends up in ``message`` unchanged.

Example::

    client = FinanceApiClient(base_url="http://localhost:8080", discover=True)
    transaction, error = client.add_transaction(
        1, {"type": "income", "amount": 1000, "description": "Bonus"}
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_OPENAPI_PATH = "/api-docs/openapi.json"


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/users/{id}/transactions``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None

    def url_path(self, **params: Any) -> str:
        """Fill the path template with ``params``."""
        return self.path.format(**params)


class FinanceApiClient:
    """Client for the personal finance API."""

    _KNOWN_TAGS = ("users", "transactions", "articles")

    _DEFAULT_ENDPOINTS: Dict[str, List[Tuple[str, str]]] = {
        "users": [("GET", "/users")],
        "transactions": [
            ("GET", "/users/{id}/transactions"),
            ("POST", "/users/{id}/transactions"),
            ("PUT", "/users/{userId}/transactions/{transactionId}"),
        ],
        "articles": [("GET", "/articles")],
    }

    def __init__(
        self,
        *,
        base_url: str,
        openapi_path: str = DEFAULT_OPENAPI_PATH,
        discover: bool = False,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            openapi_path: Path of the OpenAPI document on the server.
            discover: Fetch the OpenAPI document right away and use the
                paths it describes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.openapi_path = openapi_path
        self.session = session or requests.Session()
        self.timeout = timeout
        self.spec: Dict[str, Any] = {}
        self.endpoints: Dict[str, List[ApiEndpoint]] = {tag: [] for tag in self._KNOWN_TAGS}
        if discover:
            self.discover()
        self._ensure_default_endpoints()

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def discover(self) -> Optional[Dict[str, Any]]:
        """Load the OpenAPI document from the server and record its endpoints.

        Returns the error dictionary if the document could not be
        fetched, ``None`` otherwise.  Previously known endpoints are
        kept when discovery fails.
        """
        spec, error = self.openapi()
        if error:
            logger.warning("OpenAPI discovery failed, using default paths: %s", error["message"])
            return error
        self.spec = spec or {}
        discovered: Dict[str, List[ApiEndpoint]] = {tag: [] for tag in self._KNOWN_TAGS}
        for path, methods in self.spec.get("paths", {}).items():
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                for tag in (t.lower() for t in op.get("tags", [])):
                    if tag in discovered:
                        discovered[tag].append(
                            ApiEndpoint(
                                path=path,
                                method=method_lower.upper(),
                                operation_id=op.get("operationId"),
                            )
                        )
        self.endpoints = discovered
        self._ensure_default_endpoints()
        return None

    def _ensure_default_endpoints(self) -> None:
        """Fill in conventional endpoints for tags the document did not describe."""
        for category, ep_list in self._DEFAULT_ENDPOINTS.items():
            if not self.endpoints.get(category):
                self.endpoints[category] = [
                    ApiEndpoint(path=path, method=method) for method, path in ep_list
                ]

    def _pick_endpoint(self, category: str, method: str) -> Optional[ApiEndpoint]:
        """Return the first endpoint of ``category`` using ``method``."""
        method_upper = method.upper()
        for ep in self.endpoints.get(category, []):
            if ep.method == method_upper:
                return ep
        return None

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the decoded JSON body
            on success.  ``error`` describes the failure otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(
        self, category: str, method: str, *, json_body: Any | None = None, **params: Any
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        ep = self._pick_endpoint(category, method)
        if not ep:
            message = f"No {method} endpoint for {category}"
            logger.warning(message)
            return None, {"status_code": None, "message": message}
        return self._request(ep.method, ep.url_path(**params), json_body=json_body)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def openapi(self) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Fetch the raw OpenAPI document served next to the docs page."""
        return self._request("GET", self.openapi_path)

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._call("users", "GET")
        return (data or []), error

    def list_transactions(self, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._call("transactions", "GET", id=user_id)
        return (data or []), error

    def add_transaction(
        self, user_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a transaction for ``user_id``; the server assigns its id."""
        return self._call("transactions", "POST", json_body=payload, id=user_id)

    def update_transaction(
        self, user_id: int, transaction_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Send the fields in ``payload``; fields left out stay unchanged on the server."""
        return self._call(
            "transactions",
            "PUT",
            json_body=payload,
            userId=user_id,
            transactionId=transaction_id,
        )

    def list_articles(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._call("articles", "GET")
        return (data or []), error
