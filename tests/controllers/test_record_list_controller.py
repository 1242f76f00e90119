# -*- coding: utf-8 -*-
"""
Unit tests for RecordListController.

Tests cover:
- Loading only the signed-in user's rows
- Deleting, with the record dropped from the list even when the store refuses
- Filters applied to the loaded list
- Participants mapped from NDIS plan rows
- Create and update
"""

import pytest

from app.config import Config
from controllers.record_list_controller import (
    LEGAL_DOCUMENTS, PARTICIPANTS, SERVICE_PROVIDERS, TRANSACTIONS, RecordListController
)


@pytest.fixture
def documents(qapp, memory_store, user_id):
    memory_store.insert(Config.LEGAL_DOCUMENTS_TABLE, {
        "id": "42", "user_id": user_id, "title": "Last Will and Testament - Jane Doe",
        "type": "will", "status": "draft", "created_at": "2024-05-01T10:00:00",
    })
    memory_store.insert(Config.LEGAL_DOCUMENTS_TABLE, {
        "id": "43", "user_id": user_id, "title": "Medical Power of Attorney",
        "type": "poa", "status": "active", "created_at": "2024-05-02T10:00:00",
    })
    memory_store.insert(Config.LEGAL_DOCUMENTS_TABLE, {
        "id": "99", "user_id": "someone-else", "title": "Other Will",
        "type": "will", "status": "draft", "created_at": "2024-05-03T10:00:00",
    })
    return RecordListController(memory_store, LEGAL_DOCUMENTS)


class TestLoad:
    """Tests for load()."""

    def test_load_user_rows_newest_first(self, documents, user_id):
        """Test only the user's rows are loaded, newest first."""
        result = documents.load(user_id)

        assert result.success
        assert [r["id"] for r in documents.records] == ["43", "42"]

    def test_records_loaded_signal(self, documents, user_id, qtbot):
        """Test load emits the loaded records."""
        with qtbot.waitSignal(documents.records_loaded) as blocker:
            documents.load(user_id)
        assert len(blocker.args[0]) == 2

    def test_load_failure_keeps_list(self, documents, memory_store, user_id, monkeypatch):
        """Test a failed reload keeps the previous records."""
        documents.load(user_id)

        def fail(*args, **kwargs):
            raise ConnectionError("offline")

        monkeypatch.setattr(memory_store, "select", fail)
        result = documents.load(user_id)

        assert not result.success
        assert result.message == "offline"
        assert len(documents.records) == 2


class TestDelete:
    """Tests for delete()."""

    def test_delete_then_reload(self, documents, user_id, qtbot):
        """Test a deleted record is gone from the list and from the store."""
        documents.load(user_id)

        with qtbot.waitSignal(documents.record_deleted) as blocker:
            result = documents.delete("42")

        assert result.success
        assert blocker.args == ["42"]
        assert documents.find("42") is None

        documents.load(user_id)
        assert [r["id"] for r in documents.records] == ["43"]

    def test_failed_delete_still_drops_record(self, qapp, failing_delete_store, user_id, qtbot):
        """Test a refused delete reports the error but the record leaves the list."""
        failing_delete_store.insert(Config.LEGAL_DOCUMENTS_TABLE, {
            "id": "42", "user_id": user_id, "title": "Will", "type": "will", "status": "draft",
        })
        controller = RecordListController(failing_delete_store, LEGAL_DOCUMENTS)
        controller.load(user_id)

        with qtbot.waitSignal(controller.record_deleted) as blocker:
            result = controller.delete("42", user_id=user_id)

        assert not result.success
        assert result.message == "permission denied for table"
        assert controller.last_error == "permission denied for table"
        assert blocker.args == ["42"]
        assert controller.find("42") is None

        controller.load(user_id)
        assert controller.find("42") is not None

    def test_delete_scoped_to_user(self, documents, memory_store, user_id):
        """Test a delete scoped to one user leaves other users' rows in the store."""
        result = documents.delete("99", user_id=user_id)

        assert result.success
        assert [r["id"] for r in memory_store.select(Config.LEGAL_DOCUMENTS_TABLE)
                if r["id"] == "99"] == ["99"]


class TestFilters:
    """Tests for visible_records()."""

    def test_query(self, documents, user_id):
        """Test the search text matches titles ignoring case."""
        documents.load(user_id)
        documents.set_query("JANE")
        assert [r["id"] for r in documents.visible_records()] == ["42"]

    def test_category(self, documents, user_id):
        """Test the category filter uses the document type."""
        documents.load(user_id)
        documents.set_category("poa")
        assert [r["id"] for r in documents.visible_records()] == ["43"]
        documents.set_category(None)
        assert len(documents.visible_records()) == 2

    def test_filters_changed_signal(self, documents, qtbot):
        """Test changing a filter emits filters_changed."""
        with qtbot.waitSignal(documents.filters_changed):
            documents.set_query("will")

    def test_unknown_date_range(self, qapp, memory_store):
        """Test an unknown date range is rejected."""
        controller = RecordListController(memory_store, TRANSACTIONS)
        with pytest.raises(ValueError):
            controller.set_date_range("year")


class TestParticipants:
    """Tests for the participants list."""

    def test_rows_mapped_from_plans(self, qapp, memory_store, user_id):
        """Test only NDIS plans are listed, shaped as participants."""
        memory_store.insert(Config.INSURANCE_POLICIES_TABLE, {
            "user_id": user_id, "type": "ndis", "provider": "Sam Taylor",
            "policy_number": "430000001", "status": "renewed",
        })
        memory_store.insert(Config.INSURANCE_POLICIES_TABLE, {
            "user_id": user_id, "type": "health", "provider": "Health Fund",
        })
        controller = RecordListController(memory_store, PARTICIPANTS)

        controller.load(user_id)

        assert len(controller.records) == 1
        participant = controller.records[0]
        assert participant["name"] == "Sam Taylor"
        assert participant["ndis_number"] == "430000001"
        assert participant["status"] == "inactive"

    def test_create_adds_plan_type(self, qapp, memory_store, user_id):
        """Test created participants are stored as NDIS plans."""
        controller = RecordListController(memory_store, PARTICIPANTS)

        result = controller.create({"provider": "Alex Lee"}, user_id)

        assert result.success
        row = memory_store.select(Config.INSURANCE_POLICIES_TABLE)[0]
        assert row["type"] == "ndis"
        assert row["user_id"] == user_id
        assert controller.records[0]["name"] == "Alex Lee"


class TestUpdate:
    """Tests for update()."""

    def test_update_replaces_row(self, qapp, memory_store, user_id):
        """Test an updated row replaces the loaded one."""
        stored = memory_store.insert(Config.SERVICE_PROVIDERS_TABLE, {
            "user_id": user_id, "name": "Allied Health Co", "agreement_status": "pending",
        })
        controller = RecordListController(memory_store, SERVICE_PROVIDERS)
        controller.load(user_id)

        result = controller.update(stored["id"], {"agreement_status": "active"})

        assert result.success
        assert controller.find(stored["id"])["agreement_status"] == "active"

    def test_update_missing_record(self, qapp, memory_store, user_id):
        """Test updating a missing record fails with the store message."""
        controller = RecordListController(memory_store, SERVICE_PROVIDERS)

        result = controller.update("missing", {"name": "X"})

        assert not result.success
        assert "not found" in result.message

    def test_update_other_users_record(self, qapp, memory_store, user_id):
        """Test a record owned by another user is not found for this user."""
        stored = memory_store.insert(Config.SERVICE_PROVIDERS_TABLE, {
            "user_id": "someone-else", "name": "Allied Health Co",
        })
        controller = RecordListController(memory_store, SERVICE_PROVIDERS)

        result = controller.update(stored["id"], {"name": "Renamed"}, user_id=user_id)

        assert not result.success
        assert "not found" in result.message
        assert memory_store.select(Config.SERVICE_PROVIDERS_TABLE)[0]["name"] == "Allied Health Co"
