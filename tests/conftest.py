# -*- coding: utf-8 -*-
"""
Shared fixtures.

Qt runs on the offscreen platform; persistence goes to the in-memory store.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from services.data_store_factory import DataStoreFactory
from services.exceptions import NetworkError, StoreError
from services.memory_data_store import InMemoryDataStore
from services.persistence_adapter import PersistenceAdapter


class FailingStore(InMemoryDataStore):
    """In-memory store whose inserts fail (uploads still succeed)."""

    def __init__(self, error: Exception = None):
        super().__init__()
        self.error = error or NetworkError("Connection refused")
        self.insert_attempts = 0

    def insert(self, table, row):
        self.insert_attempts += 1
        raise self.error


class FailingDeleteStore(InMemoryDataStore):
    """In-memory store whose deletes are rejected."""

    def delete(self, table, record_id, user_id=None):
        raise StoreError("permission denied for table", status_code=403)


@pytest.fixture
def memory_store():
    """Empty in-memory store."""
    return InMemoryDataStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def adapter(memory_store):
    return PersistenceAdapter(memory_store)


@pytest.fixture
def user_id():
    return "user-123"


@pytest.fixture(autouse=True)
def reset_store_factory():
    """Each test starts without a cached store."""
    DataStoreFactory.reset()
    yield
    DataStoreFactory.reset()


@pytest.fixture
def failing_delete_store():
    return FailingDeleteStore()
