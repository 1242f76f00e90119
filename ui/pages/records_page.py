# -*- coding: utf-8 -*-
"""
Record list page: search box, category filter, optional date range,
and a table over one RecordListController.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QComboBox, QTableView, QHeaderView, QAbstractItemView
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from controllers.record_list_controller import RecordListController
from services.display_mappings import STATUS_COLORS
from services.record_filter import ALL, DATE_RANGES
from ui.components.base_table_model import BaseTableModel
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class RecordsPage(QWidget):
    """
    List page for one record list.

    Subclasses add their own buttons through ``_create_actions``.
    """

    record_selected = pyqtSignal(dict)

    def __init__(self, controller: RecordListController, title: str,
                 columns: Sequence[Tuple[str, str]], user_id: Optional[str] = None,
                 formatters: Optional[Dict[str, Callable]] = None,
                 status_key: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.user_id = user_id
        self.title = title

        status_key = status_key or controller.config.category_field
        self.table_model = BaseTableModel(
            columns=columns,
            formatters=formatters,
            status_key=status_key,
            status_color=STATUS_COLORS.get(controller.config.name),
        )

        self._setup_ui()

        self.controller.filters_changed.connect(self._apply_filters)
        self.controller.records_loaded.connect(lambda records: self._apply_filters())
        self.controller.record_deleted.connect(lambda record_id: self._apply_filters())
        self.controller.record_created.connect(lambda record_id: self._apply_filters())
        self.controller.record_updated.connect(lambda record_id: self._apply_filters())

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        # Header
        header = QHBoxLayout()
        self.header_layout = header
        title_label = QLabel(self.title)
        title_font = QFont()
        title_font.setPointSize(Config.FONT_SIZE + 6)
        title_font.setBold(True)
        title_label.setFont(title_font)
        header.addWidget(title_label)
        header.addStretch()
        for button in self._create_actions():
            header.addWidget(button)
        layout.addLayout(header)

        # Filters
        filters = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search...")
        self.search_input.setClearButtonEnabled(True)
        self.search_input.textChanged.connect(self.controller.set_query)
        filters.addWidget(self.search_input, 1)

        self.category_combo = QComboBox()
        self.category_combo.addItem("All", ALL)
        for value, label in self.controller.config.category_options:
            self.category_combo.addItem(label, value)
        self.category_combo.currentIndexChanged.connect(
            lambda _: self.controller.set_category(self.category_combo.currentData())
        )
        self.category_combo.setVisible(bool(self.controller.config.category_options))
        filters.addWidget(self.category_combo)

        self.date_range_combo = QComboBox()
        for value, label in DATE_RANGES:
            self.date_range_combo.addItem(label, value)
        self.date_range_combo.currentIndexChanged.connect(
            lambda _: self.controller.set_date_range(self.date_range_combo.currentData())
        )
        self.date_range_combo.setVisible(bool(self.controller.config.date_field))
        filters.addWidget(self.date_range_combo)

        self.btn_refresh = QPushButton("Refresh")
        self.btn_refresh.clicked.connect(lambda: self.refresh())
        filters.addWidget(self.btn_refresh)

        self.btn_delete = QPushButton("Delete")
        self.btn_delete.clicked.connect(self._on_delete)
        filters.addWidget(self.btn_delete)
        layout.addLayout(filters)

        # Table
        self.table = QTableView()
        self.table.setModel(self.table_model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setAlternatingRowColors(True)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        self.table.doubleClicked.connect(self._on_double_click)
        layout.addWidget(self.table, 1)

        self.count_label = QLabel("")
        self.count_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.count_label)

        self.empty_label = QLabel("No records found")
        self.empty_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; padding: 16px;")
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

    def _create_actions(self) -> list:
        """Extra header buttons."""
        return []

    def add_action(self, button: QPushButton):
        self.header_layout.addWidget(button)

    # ==================== Data ====================

    def set_user(self, user_id: Optional[str]):
        self.user_id = user_id

    def refresh(self, data=None):
        """Reload the list from the store."""
        if not self.user_id:
            logger.warning(f"No signed-in user; {self.controller.config.name} not loaded")
            self._apply_filters()
            return
        result = self.controller.load(self.user_id)
        if not result.success:
            ErrorHandler.show_error(self, result.message)

    def _apply_filters(self):
        visible = self.controller.visible_records()
        self.table_model.set_items(visible)
        total = len(self.controller.records)
        self.count_label.setText(f"Showing {len(visible)} of {total}")
        self.empty_label.setVisible(not visible)

    def selected_record(self) -> Optional[dict]:
        indexes = self.table.selectionModel().selectedRows()
        if not indexes:
            return None
        return self.table_model.get_item(indexes[0].row())

    # ==================== Actions ====================

    def _on_double_click(self, index):
        record = self.table_model.get_item(index.row())
        if record is not None:
            self.record_selected.emit(record)

    def _on_delete(self):
        record = self.selected_record()
        if record is None:
            ErrorHandler.show_warning(self, "Select a record to delete")
            return
        if not ErrorHandler.confirm(self, "Delete the selected record?"):
            return
        result = self.controller.delete(record.get("id"), user_id=self.user_id)
        if not result.success:
            ErrorHandler.show_error(self, result.message)
