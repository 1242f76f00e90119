# -*- coding: utf-8 -*-
"""
Record List Controller
======================
Independent read path over the hosted store.

Handles:
- Loading a user's records (always a full re-fetch, no cache)
- Client-side text, category and date-range filtering
- Delete and edit of single records

One controller serves one list; ListConfig presets describe the lists
the application shows.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from PyQt5.QtCore import pyqtSignal

from app.config import Config, Vocabularies
from controllers.base_controller import BaseController, OperationResult
from models.participant import Participant
from services.data_store import DataStore
from services.record_filter import ALL, DATE_RANGES, filter_records
from utils.logger import get_logger

logger = get_logger(__name__)

RowMapper = Callable[[Dict[str, Any]], Dict[str, Any]]


@dataclass
class ListConfig:
    """What a list loads and how it is searched."""
    name: str
    table: str
    search_fields: Sequence[str]
    category_field: Optional[str] = "status"
    category_options: Sequence = ()
    base_filters: Dict[str, Any] = field(default_factory=dict)
    order_by: Optional[str] = "created_at"
    descending: bool = True
    date_field: Optional[str] = None
    row_mapper: Optional[RowMapper] = None


def _participant_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return Participant.from_policy(row).to_dict()


LEGAL_DOCUMENTS = ListConfig(
    name="legal_documents",
    table=Config.LEGAL_DOCUMENTS_TABLE,
    search_fields=("title", "type", "status"),
    category_field="type",
    category_options=[
        ("will", "Wills"),
        ("trust", "Trusts"),
        ("poa", "Powers of Attorney"),
        ("living_will", "Living Wills"),
        ("healthcare_directive", "Healthcare Directives"),
    ],
)

SERVICE_AGREEMENTS = ListConfig(
    name="service_agreements",
    table=Config.SERVICE_AGREEMENTS_TABLE,
    search_fields=("participant_name", "provider_name", "services"),
    category_options=Vocabularies.AGREEMENT_STATUS,
)

PARTICIPANTS = ListConfig(
    name="participants",
    table=Config.INSURANCE_POLICIES_TABLE,
    search_fields=("name", "ndis_number", "email", "phone"),
    category_options=Vocabularies.PARTICIPANT_STATUS,
    base_filters={"type": "ndis"},
    row_mapper=_participant_row,
)

SERVICE_PROVIDERS = ListConfig(
    name="service_providers",
    table=Config.SERVICE_PROVIDERS_TABLE,
    search_fields=("name", "services", "contact_name", "email"),
    category_field="agreement_status",
    category_options=Vocabularies.PROVIDER_AGREEMENT_STATUS,
    order_by="name",
    descending=False,
)

TRANSACTIONS = ListConfig(
    name="transactions",
    table=Config.TRANSACTIONS_TABLE,
    search_fields=("provider", "service", "notes"),
    category_field="category",
    category_options=[(c, c) for c in Vocabularies.BUDGET_CATEGORIES],
    order_by="date",
    date_field="date",
)


class RecordListController(BaseController):
    """
    Controller for one record list.

    ``records`` holds what the last load returned; ``visible_records()``
    applies the current filters to it.
    """

    # Signals
    records_loaded = pyqtSignal(list)
    record_deleted = pyqtSignal(str)  # record id
    record_updated = pyqtSignal(str)  # record id
    record_created = pyqtSignal(str)  # record id
    filters_changed = pyqtSignal()

    def __init__(self, store: DataStore, config: ListConfig, parent=None):
        super().__init__(parent)
        self.store = store
        self.config = config

        self._rows: List[Dict[str, Any]] = []
        self._query = ""
        self._category = ALL
        self._date_range = ALL

    # ==================== Data ====================

    @property
    def records(self) -> List[Dict[str, Any]]:
        """Loaded records in display shape."""
        mapper = self.config.row_mapper
        if mapper is None:
            return list(self._rows)
        return [mapper(row) for row in self._rows]

    def find(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Loaded record with ``record_id``, or None."""
        for record in self.records:
            if str(record.get("id")) == str(record_id):
                return record
        return None

    def load(self, user_id: str) -> OperationResult:
        """
        Fetch the user's records from the store, replacing the list.

        On failure the previous list is kept.
        """
        self._log_operation("load", list=self.config.name, user_id=user_id)
        result = self.execute_with_error_handling("load", self._fetch, user_id)
        if result.success:
            self._rows = result.data
            self.records_loaded.emit(self.records)
            result.data = self.records
        return result

    def _fetch(self, user_id: str) -> List[Dict[str, Any]]:
        filters = {"user_id": user_id}
        filters.update(self.config.base_filters)
        return self.store.select(
            self.config.table,
            filters=filters,
            order_by=self.config.order_by,
            descending=self.config.descending,
        )

    # ==================== Filters ====================

    @property
    def query(self) -> str:
        return self._query

    @property
    def category(self) -> str:
        return self._category

    @property
    def date_range(self) -> str:
        return self._date_range

    def set_query(self, query: str):
        self._query = query or ""
        self.filters_changed.emit()

    def set_category(self, category: Optional[str]):
        self._category = category or ALL
        self.filters_changed.emit()

    def set_date_range(self, date_range: Optional[str]):
        if date_range and date_range not in dict(DATE_RANGES):
            raise ValueError(f"Unknown date range: {date_range}")
        self._date_range = date_range or ALL
        self.filters_changed.emit()

    def visible_records(self) -> List[Dict[str, Any]]:
        """Loaded records that pass the current filters."""
        return filter_records(
            self.records,
            query=self._query,
            category=self._category,
            fields=self.config.search_fields,
            category_field=self.config.category_field,
            date_range=self._date_range if self.config.date_field else None,
            date_field=self.config.date_field or "date",
        )

    # ==================== Writes ====================

    def delete(self, record_id: str, user_id: Optional[str] = None) -> OperationResult:
        """
        Delete a record in the store, then drop it from the list.

        The record leaves the list whatever the store answers; a failed
        delete is reported through the result and ``last_error`` only, and
        the next load shows the record again.
        """
        self._log_operation("delete", list=self.config.name, record_id=record_id)
        result = self.execute_with_error_handling(
            "delete", self.store.delete, self.config.table, record_id, user_id=user_id
        )
        self._rows = [row for row in self._rows if str(row.get("id")) != str(record_id)]
        self.record_deleted.emit(str(record_id))
        return result

    def update(self, record_id: str, patch: Dict[str, Any],
               user_id: Optional[str] = None) -> OperationResult:
        """Patch a record in the store and replace it in the list."""
        self._log_operation("update", list=self.config.name, record_id=record_id)
        result = self.execute_with_error_handling(
            "update", self.store.update, self.config.table, record_id, patch, user_id=user_id
        )
        if result.success:
            updated = result.data
            self._rows = [
                updated if str(row.get("id")) == str(record_id) else row
                for row in self._rows
            ]
            self.record_updated.emit(str(record_id))
        return result

    def create(self, row: Dict[str, Any], user_id: str) -> OperationResult:
        """Insert a new record for the user and append it to the list."""
        self._log_operation("create", list=self.config.name, user_id=user_id)
        payload = dict(self.config.base_filters)
        payload.update(row)
        payload["user_id"] = user_id
        result = self.execute_with_error_handling(
            "save", self.store.insert, self.config.table, payload
        )
        if result.success:
            self._rows.append(result.data)
            self.record_created.emit(str(result.data.get("id")))
        return result
