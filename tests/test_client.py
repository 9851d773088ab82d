"""Tests for the requests-based FinanceApiClient (HTTP mocked)."""

from unittest.mock import MagicMock

import pytest
import requests

from finance_client import FinanceApiClient


@pytest.fixture
def session():
    return MagicMock()


def _called(session):
    kwargs = session.request.call_args.kwargs
    return kwargs["method"], kwargs["url"], kwargs.get("json")


class TestOperations:
    def test_list_users(self, session, mock_response):
        session.request.return_value = mock_response(json_data=[{"id": 1}])
        client = FinanceApiClient(base_url="http://api:8080/", session=session)
        users, error = client.list_users()
        assert users == [{"id": 1}]
        assert error is None
        assert _called(session) == ("GET", "http://api:8080/users", None)

    def test_add_transaction(self, session, mock_response):
        session.request.return_value = mock_response(status_code=201, json_data={"id": 3})
        client = FinanceApiClient(base_url="http://api", session=session)
        payload = {"type": "income", "amount": 1000, "description": "Test"}
        created, error = client.add_transaction(1, payload)
        assert created == {"id": 3}
        assert error is None
        assert _called(session) == ("POST", "http://api/users/1/transactions", payload)

    def test_update_transaction(self, session, mock_response):
        session.request.return_value = mock_response(json_data={"id": 1, "amount": 5})
        client = FinanceApiClient(base_url="http://api", session=session)
        client.update_transaction(1, 2, {"amount": 5})
        assert _called(session) == ("PUT", "http://api/users/1/transactions/2", {"amount": 5})

    def test_list_transactions_and_articles(self, session, mock_response):
        session.request.return_value = mock_response(json_data=[])
        client = FinanceApiClient(base_url="http://api", session=session)
        client.list_transactions(4)
        assert _called(session)[1] == "http://api/users/4/transactions"
        client.list_articles()
        assert _called(session)[1] == "http://api/articles"


class TestErrors:
    def test_not_found_returns_plain_text_message(self, session, mock_response):
        session.request.return_value = mock_response(status_code=404, text="Pengguna tidak ditemukan")
        client = FinanceApiClient(base_url="http://api", session=session)
        transactions, error = client.list_transactions(99)
        assert transactions == []
        assert error == {"status_code": 404, "message": "Pengguna tidak ditemukan"}

    def test_transport_error(self, session):
        session.request.side_effect = requests.ConnectionError("refused")
        client = FinanceApiClient(base_url="http://api", session=session)
        created, error = client.add_transaction(1, {})
        assert created is None
        assert error["status_code"] is None
        assert "refused" in error["message"]


class TestDiscovery:
    def test_uses_paths_from_openapi_document(self, session, mock_response):
        spec = {
            "paths": {
                "/v2/people": {"get": {"tags": ["users"], "operationId": "list_users"}},
                "/v2/people/{id}/tx": {
                    "get": {"tags": ["transactions"]},
                    "post": {"tags": ["transactions"]},
                },
            }
        }
        session.request.return_value = mock_response(json_data=spec)
        client = FinanceApiClient(base_url="http://api", session=session, discover=True)
        assert _called(session)[1] == "http://api/api-docs/openapi.json"

        session.request.return_value = mock_response(json_data=[])
        client.list_users()
        assert _called(session)[1] == "http://api/v2/people"
        client.add_transaction(1, {"type": "income"})
        assert _called(session)[:2] == ("POST", "http://api/v2/people/1/tx")
        # Tags absent from the document keep their conventional paths.
        client.list_articles()
        assert _called(session)[1] == "http://api/articles"

    def test_failed_discovery_keeps_defaults(self, session, mock_response):
        session.request.return_value = mock_response(status_code=500, text="boom")
        client = FinanceApiClient(base_url="http://api", session=session)
        error = client.discover()
        assert error["status_code"] == 500
        session.request.return_value = mock_response(json_data=[])
        client.list_users()
        assert _called(session)[1] == "http://api/users"
