# -*- coding: utf-8 -*-
"""
Data Store Abstraction Layer.

All persistence goes through a hosted table/row store plus blob storage.
This module defines the interface the rest of the application relies on:

- HttpDataStore: the hosted backend (PostgREST tables + storage buckets)
- InMemoryDataStore: process-local tables for offline use and tests

Every query is scoped by the caller; the store itself knows nothing about
the signed-in user.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class DataStoreType(Enum):
    """Supported data store types."""
    HTTP = "http"        # Hosted backend
    MEMORY = "memory"    # In-process tables


class DataStore(ABC):
    """
    Abstract base class for data stores.

    Rows are plain dicts. Every row has an ``id`` key assigned by the store.
    """

    @property
    @abstractmethod
    def store_type(self) -> DataStoreType:
        """Return the type of this store."""
        pass

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        columns: str = "*",
    ) -> List[Dict[str, Any]]:
        """
        Fetch rows from a table.

        Args:
            table: Table name
            filters: Column equality predicates (``eq``)
            in_filters: Column membership predicates (``in``)
            order_by: Column to sort on
            descending: Sort direction
            limit: Maximum number of rows
            columns: Column list, ``*`` for all

        Returns:
            List of rows
        """
        pass

    @abstractmethod
    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored (with its ``id``)."""
        pass

    @abstractmethod
    def update(self, table: str, record_id: str, patch: Dict[str, Any],
               user_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Patch one row by id and return the updated row.

        With ``user_id`` the row must also belong to that user; a row owned
        by someone else is reported as not found.
        """
        pass

    @abstractmethod
    def delete(self, table: str, record_id: str, user_id: Optional[str] = None) -> None:
        """Delete one row by id, optionally only when ``user_id`` owns it."""
        pass

    @abstractmethod
    def upload(self, bucket: str, path: str, file_path: str) -> str:
        """
        Store a local file as a blob.

        Args:
            bucket: Storage bucket name
            path: Object path inside the bucket
            file_path: Local file to upload

        Returns:
            The object path as recorded by the store
        """
        pass

    def health_check(self) -> Dict[str, Any]:
        """Check health status of the store."""
        return {"status": "ok", "type": self.store_type.value}
