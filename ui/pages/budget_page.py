# -*- coding: utf-8 -*-
"""
NDIS budget page: plan totals, funding categories and transactions.
"""

from datetime import date
from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QComboBox,
    QLineEdit, QDialog, QFormLayout, QDialogButtonBox, QDateEdit,
    QTableView, QHeaderView, QAbstractItemView, QProgressBar, QFrame
)
from PyQt5.QtCore import QDate
from PyQt5.QtGui import QDoubleValidator, QFont

from app.config import Config, Vocabularies
from controllers.record_list_controller import TRANSACTIONS, RecordListController
from models.budget import Transaction
from services.budget_service import BudgetService, summarize, validate_transaction
from services.data_store import DataStore
from services.display_mappings import get_budget_category_color, get_transaction_status_display
from ui.components.base_table_model import BaseTableModel
from ui.error_handler import ErrorHandler
from ui.pages.records_page import RecordsPage
from utils.helpers import format_currency, format_date, parse_amount
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_COLUMNS = [
    ("category", "Category"),
    ("amount", "Budget"),
    ("used", "Used"),
    ("remaining", "Remaining"),
    ("percent_used", "% Used"),
]

TRANSACTION_COLUMNS = [
    ("date", "Date"),
    ("provider", "Provider"),
    ("service", "Service"),
    ("category", "Category"),
    ("amount", "Amount"),
    ("status", "Status"),
]


class TransactionDialog(QDialog):
    """Form for a new transaction."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Add Transaction")
        self.setMinimumWidth(420)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.date_input = QDateEdit(QDate.currentDate())
        self.date_input.setCalendarPopup(True)
        form.addRow("Date *:", self.date_input)

        self.provider_input = QLineEdit()
        form.addRow("Provider *:", self.provider_input)

        self.service_input = QLineEdit()
        form.addRow("Service *:", self.service_input)

        self.category_combo = QComboBox()
        self.category_combo.addItem("Select category", "")
        for category in Vocabularies.BUDGET_CATEGORIES:
            self.category_combo.addItem(category, category)
        form.addRow("Category *:", self.category_combo)

        self.amount_input = QLineEdit()
        self.amount_input.setValidator(QDoubleValidator(0.0, 1e9, 2))
        self.amount_input.setPlaceholderText("0.00")
        form.addRow("Amount *:", self.amount_input)

        self.notes_input = QLineEdit()
        form.addRow("Notes:", self.notes_input)
        layout.addLayout(form)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def transaction(self) -> Transaction:
        qdate = self.date_input.date()
        return Transaction(
            date=date(qdate.year(), qdate.month(), qdate.day()),
            provider=self.provider_input.text().strip(),
            service=self.service_input.text().strip(),
            category=self.category_combo.currentData() or "",
            amount=parse_amount(self.amount_input.text()),
            notes=self.notes_input.text().strip() or None,
        )

    def _on_accept(self):
        errors = validate_transaction(self.transaction())
        if errors:
            self.error_label.setText(errors[0])
            self.error_label.setVisible(True)
            return
        self.accept()


class BudgetPage(QWidget):
    """Plan totals, per-category usage and the transactions list."""

    def __init__(self, store: DataStore, user_id: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.service = BudgetService(store)
        self.user_id = user_id
        self.transactions = RecordListController(store, TRANSACTIONS, self)

        self.category_model = BaseTableModel(
            columns=CATEGORY_COLUMNS,
            formatters={
                "amount": format_currency,
                "used": format_currency,
                "remaining": format_currency,
                "percent_used": lambda value: f"{value}%",
            },
            status_key="category",
            status_color=get_budget_category_color,
        )
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        title = QLabel("Budget")
        title_font = QFont()
        title_font.setPointSize(Config.FONT_SIZE + 6)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        # Totals
        totals = QFrame()
        totals.setStyleSheet(f"QFrame {{ border: 1px solid {Config.BORDER_COLOR}; border-radius: 8px; }}")
        totals_layout = QHBoxLayout(totals)
        self.total_label = QLabel("")
        self.used_label = QLabel("")
        self.remaining_label = QLabel("")
        for label in (self.total_label, self.used_label, self.remaining_label):
            label.setStyleSheet("border: none;")
            totals_layout.addWidget(label)
        self.usage_bar = QProgressBar()
        self.usage_bar.setMaximum(100)
        totals_layout.addWidget(self.usage_bar, 1)
        layout.addWidget(totals)

        self.category_table = QTableView()
        self.category_table.setModel(self.category_model)
        self.category_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.category_table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.category_table.verticalHeader().setVisible(False)
        self.category_table.setMaximumHeight(160)
        layout.addWidget(self.category_table)

        self.transactions_view = RecordsPage(
            self.transactions,
            "Transactions",
            TRANSACTION_COLUMNS,
            user_id=self.user_id,
            formatters={
                "date": format_date,
                "amount": format_currency,
                "status": get_transaction_status_display,
            },
            status_key="status",
        )
        self.btn_add = QPushButton("Add Transaction")
        self.btn_add.clicked.connect(lambda: self.add_transaction())
        self.transactions_view.add_action(self.btn_add)
        layout.addWidget(self.transactions_view, 1)

    def set_user(self, user_id: Optional[str]):
        self.user_id = user_id
        self.transactions_view.set_user(user_id)

    def refresh(self, data=None):
        """Reload plan categories and transactions."""
        if not self.user_id:
            return
        try:
            categories = self.service.load_categories(self.user_id)
        except Exception as e:
            ErrorHandler.handle(e, self, context="load")
            return
        self.category_model.set_items([c.to_dict() for c in categories])

        summary = summarize(categories)
        self.total_label.setText(f"Total: {format_currency(summary.total)}")
        self.used_label.setText(f"Used: {format_currency(summary.used)}")
        self.remaining_label.setText(f"Remaining: {format_currency(summary.remaining)}")
        self.usage_bar.setValue(min(summary.percent_used, 100))

        self.transactions_view.refresh()

    def add_transaction(self, transaction: Optional[Transaction] = None) -> Optional[Transaction]:
        """Record a transaction from the dialog (or the one given)."""
        if transaction is None:
            dialog = TransactionDialog(self)
            if dialog.exec_() != QDialog.Accepted:
                return None
            transaction = dialog.transaction()
        try:
            stored = self.service.record_transaction(self.user_id, transaction)
        except Exception as e:
            ErrorHandler.handle(e, self, context="transaction")
            return None
        self.refresh()
        return stored
