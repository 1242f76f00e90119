# -*- coding: utf-8 -*-
"""
Unit tests for the hosted store client with a mocked HTTP session.

Tests cover:
- PostgREST query parameters for select
- Headers and representation preference on insert
- Update and delete scoped to the owning user
- Blob upload endpoint
- HTTP and connection failures mapped to StoreError / NetworkError
"""

from unittest.mock import MagicMock, Mock

import pytest
import requests

from services.exceptions import NetworkError, StoreError
from services.http_data_store import HttpDataStore, StoreConfig


def _response(status_code=200, body=None):
    response = Mock()
    response.status_code = status_code
    response.text = "" if body is None else "json"
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def store(session):
    config = StoreConfig(
        base_url="https://project.example.co/",
        anon_key="anon-key",
        access_token="user-token",
        timeout=5,
    )
    return HttpDataStore(config, session=session)


class TestSelect:
    """Tests for select()."""

    def test_query_params(self, store, session):
        """Test filters, ordering and limit become PostgREST params."""
        session.request.return_value = _response(body=[{"id": "1"}])

        rows = store.select(
            "legal_documents",
            filters={"user_id": "user-123", "archived": False},
            order_by="created_at",
            descending=True,
            limit=10,
        )

        assert rows == [{"id": "1"}]
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://project.example.co/rest/v1/legal_documents"
        assert kwargs["params"] == {
            "select": "*",
            "user_id": "eq.user-123",
            "archived": "eq.false",
            "order": "created_at.desc",
            "limit": "10",
        }
        assert kwargs["timeout"] == 5

    def test_in_filter(self, store, session):
        """Test in_filters render as in.(a,b)."""
        session.request.return_value = _response(body=[])

        store.select("service_providers", in_filters={"id": ["a", "b"]})

        assert session.request.call_args.kwargs["params"]["id"] == "in.(a,b)"

    def test_empty_body(self, store, session):
        """Test an empty body is an empty list."""
        session.request.return_value = _response(body=None)
        assert store.select("transactions") == []


class TestWrites:
    """Tests for insert, update and delete."""

    def test_insert_headers(self, store, session):
        """Test insert sends auth headers and asks for the stored row."""
        session.request.return_value = _response(201, [{"id": "doc-1", "title": "Will"}])

        row = store.insert("legal_documents", {"title": "Will"})

        assert row == {"id": "doc-1", "title": "Will"}
        kwargs = session.request.call_args.kwargs
        assert kwargs["json"] == [{"title": "Will"}]
        headers = kwargs["headers"]
        assert headers["apikey"] == "anon-key"
        assert headers["Authorization"] == "Bearer user-token"
        assert headers["Prefer"] == "return=representation"

    def test_insert_without_row(self, store, session):
        """Test an insert returning nothing raises StoreError."""
        session.request.return_value = _response(201, [])
        with pytest.raises(StoreError):
            store.insert("legal_documents", {"title": "Will"})

    def test_update_missing_record(self, store, session):
        """Test updating a missing row raises a 404 StoreError."""
        session.request.return_value = _response(200, [])
        with pytest.raises(StoreError) as exc_info:
            store.update("transactions", "missing", {"status": "processed"})
        assert exc_info.value.status_code == 404

    def test_delete_params(self, store, session):
        """Test delete targets one id."""
        session.request.return_value = _response(204)

        store.delete("service_agreements", "42")

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "DELETE"
        assert kwargs["params"] == {"id": "eq.42"}

    def test_writes_scoped_to_owner(self, store, session):
        """Test update and delete add the owner filter when a user id is given."""
        session.request.return_value = _response(200, [{"id": "42", "status": "active"}])

        store.update("service_agreements", "42", {"status": "active"}, user_id="user-123")
        assert session.request.call_args.kwargs["params"] == {
            "id": "eq.42", "user_id": "eq.user-123"
        }

        session.request.return_value = _response(204)
        store.delete("service_agreements", "42", user_id="user-123")
        assert session.request.call_args.kwargs["params"] == {
            "id": "eq.42", "user_id": "eq.user-123"
        }


class TestUpload:
    """Tests for blob upload."""

    def test_upload(self, store, session, tmp_path):
        """Test the file is posted to the storage object endpoint."""
        path = tmp_path / "will.pdf"
        path.write_bytes(b"%PDF-1.4")
        session.request.return_value = _response(200, {"Key": "legal-documents/u/wills/will.pdf"})

        stored = store.upload("legal-documents", "u/wills/will.pdf", str(path))

        assert stored == "u/wills/will.pdf"
        kwargs = session.request.call_args.kwargs
        assert kwargs["url"] == (
            "https://project.example.co/storage/v1/object/legal-documents/u/wills/will.pdf"
        )
        assert kwargs["data"] == b"%PDF-1.4"
        assert kwargs["headers"]["Content-Type"] == "application/pdf"

    def test_upload_missing_file(self, store, session):
        """Test a missing local file raises before any request."""
        with pytest.raises(ValueError):
            store.upload("legal-documents", "u/wills/none.pdf", "/no/such/file.pdf")
        session.request.assert_not_called()


class TestErrors:
    """Tests for error mapping."""

    def test_http_error(self, store, session):
        """Test a rejected request raises StoreError with the store's message."""
        session.request.return_value = _response(
            403, {"message": "new row violates row-level security policy"}
        )

        with pytest.raises(StoreError) as exc_info:
            store.insert("legal_documents", {"title": "Will"})

        error = exc_info.value
        assert not isinstance(error, NetworkError)
        assert error.status_code == 403
        assert error.message == "new row violates row-level security policy"

    def test_connection_error(self, store, session):
        """Test an unreachable server raises NetworkError."""
        session.request.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(NetworkError):
            store.select("legal_documents")

    def test_health_check_reports_error(self, store, session):
        """Test health_check returns an error status instead of raising."""
        session.request.side_effect = requests.exceptions.Timeout("timed out")

        assert store.health_check()["status"] == "error"
