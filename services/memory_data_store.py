# -*- coding: utf-8 -*-
"""
In-memory data store.

Keeps tables and blobs in process memory. Used when DATA_PROVIDER=memory
(offline/demo mode) and as the store behind the test suite.
"""

import copy
import os
import time
import uuid
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from services.data_store import DataStore, DataStoreType
from services.exceptions import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryDataStore(DataStore):
    """
    DataStore backed by dictionaries.

    Features:
    - store-assigned string ids and ``created_at`` timestamps
    - ``eq``/``in`` filtering, ordering and limits like the hosted store
    - rows are copied in and out, so callers never share state with the store
    - optional simulated latency
    """

    def __init__(self, simulate_delay: bool = False, delay_ms: int = 200):
        self.simulate_delay = simulate_delay
        self.delay_ms = delay_ms
        self._tables: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._blobs: Dict[Tuple[str, str], bytes] = {}

    @property
    def store_type(self) -> DataStoreType:
        return DataStoreType.MEMORY

    def _delay(self):
        if self.simulate_delay:
            time.sleep(self.delay_ms / 1000.0)

    def _table(self, table: str) -> Dict[str, Dict[str, Any]]:
        return self._tables.setdefault(table, {})

    # ==================== Tables ====================

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
        self._delay()
        rows = list(self._table(table).values())

        for column, value in (filters or {}).items():
            rows = [r for r in rows if r.get(column) == value]
        for column, values in (in_filters or {}).items():
            allowed = list(values)
            rows = [r for r in rows if r.get(column) in allowed]

        if order_by:
            # Rows missing the column sort last in either direction
            present = [r for r in rows if r.get(order_by) is not None]
            missing = [r for r in rows if r.get(order_by) is None]
            present.sort(key=lambda r: r[order_by], reverse=descending)
            rows = present + missing

        if limit is not None:
            rows = rows[:limit]

        if columns != "*":
            wanted = [c.strip() for c in columns.split(",")]
            rows = [{c: r.get(c) for c in wanted} for r in rows]

        return copy.deepcopy(rows)

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        self._delay()
        stored = copy.deepcopy(row)
        record_id = str(stored.get("id") or uuid.uuid4())
        rows = self._table(table)
        if record_id in rows:
            raise StoreError(
                f'duplicate key value violates unique constraint "{table}_pkey"',
                status_code=409,
            )
        stored["id"] = record_id
        stored.setdefault("created_at", datetime.now().isoformat())
        rows[record_id] = stored
        logger.debug(f"Inserted {table}/{record_id}")
        return copy.deepcopy(stored)

    def _owned(self, row: Optional[Dict[str, Any]], user_id: Optional[str]) -> bool:
        return row is not None and (user_id is None or row.get("user_id") == user_id)

    def update(self, table: str, record_id: str, patch: Dict[str, Any],
               user_id: Optional[str] = None) -> Dict[str, Any]:
        self._delay()
        rows = self._table(table)
        if not self._owned(rows.get(record_id), user_id):
            raise StoreError(f"Record {record_id} not found in {table}", status_code=404)
        rows[record_id].update(copy.deepcopy(patch))
        rows[record_id]["id"] = record_id
        logger.debug(f"Updated {table}/{record_id}")
        return copy.deepcopy(rows[record_id])

    def delete(self, table: str, record_id: str, user_id: Optional[str] = None) -> None:
        self._delay()
        rows = self._table(table)
        # Deleting a missing or foreign row is not an error on the hosted store either
        if self._owned(rows.get(record_id), user_id):
            del rows[record_id]
        logger.debug(f"Deleted {table}/{record_id}")

    # ==================== Storage ====================

    def upload(self, bucket: str, path: str, file_path: str) -> str:
        self._delay()
        if not file_path or not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")
        key = (bucket, path)
        if key in self._blobs:
            raise StoreError("The resource already exists", status_code=409)
        with open(file_path, "rb") as f:
            self._blobs[key] = f.read()
        logger.debug(f"Uploaded blob {bucket}/{path}")
        return path

    def has_blob(self, bucket: str, path: str) -> bool:
        """Check whether a blob exists."""
        return (bucket, path) in self._blobs

    def blob_count(self, bucket: Optional[str] = None) -> int:
        """Number of stored blobs, optionally for one bucket."""
        if bucket is None:
            return len(self._blobs)
        return sum(1 for b, _ in self._blobs if b == bucket)

    def clear(self):
        """Drop all tables and blobs."""
        self._tables.clear()
        self._blobs.clear()
