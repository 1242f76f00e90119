# -*- coding: utf-8 -*-
"""
Add/Edit Service Provider dialog.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLabel, QLineEdit, QComboBox,
    QDialogButtonBox
)

from app.config import Config, Vocabularies
from models.service_provider import ServiceProvider


class ProviderDialog(QDialog):
    """
    Form for a service provider.

    Services are entered as one comma-separated line.
    """

    def __init__(self, provider: Optional[ServiceProvider] = None, parent=None):
        super().__init__(parent)
        self._original = provider
        self.setWindowTitle("Edit Provider" if provider else "Add Provider")
        self.setMinimumWidth(460)
        self._setup_ui()
        if provider is not None:
            self._load(provider)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.name_input = QLineEdit()
        form.addRow("Provider Name *:", self.name_input)

        self.services_input = QLineEdit()
        self.services_input.setPlaceholderText("e.g., Physiotherapy, Personal Care")
        form.addRow("Services:", self.services_input)

        self.contact_input = QLineEdit()
        form.addRow("Contact Person:", self.contact_input)

        self.email_input = QLineEdit()
        form.addRow("Email:", self.email_input)

        self.phone_input = QLineEdit()
        form.addRow("Phone:", self.phone_input)

        self.agreement_combo = QComboBox()
        for value, label in Vocabularies.PROVIDER_AGREEMENT_STATUS:
            self.agreement_combo.addItem(label, value)
        self.agreement_combo.setCurrentIndex(self.agreement_combo.findData("none"))
        form.addRow("Agreement:", self.agreement_combo)
        layout.addLayout(form)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _load(self, provider: ServiceProvider):
        self.name_input.setText(provider.name or "")
        self.services_input.setText(", ".join(provider.services))
        self.contact_input.setText(provider.contact_name or "")
        self.email_input.setText(provider.email or "")
        self.phone_input.setText(provider.phone or "")
        index = self.agreement_combo.findData(provider.agreement_status)
        if index >= 0:
            self.agreement_combo.setCurrentIndex(index)

    def provider(self) -> ServiceProvider:
        """The provider as currently entered."""
        original = self._original
        text = self.services_input.text()
        return ServiceProvider(
            id=original.id if original else None,
            user_id=original.user_id if original else None,
            name=self.name_input.text().strip(),
            services=[s.strip() for s in text.split(",")] if text.strip() else [],
            contact_name=self.contact_input.text().strip() or None,
            email=self.email_input.text().strip() or None,
            phone=self.phone_input.text().strip() or None,
            agreement_status=self.agreement_combo.currentData(),
        )

    def _on_accept(self):
        errors = self.provider().validate()
        if errors:
            self.error_label.setText(errors[0])
            self.error_label.setVisible(True)
            return
        self.accept()
