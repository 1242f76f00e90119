# -*- coding: utf-8 -*-
"""
Add/Edit Participant dialog.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLabel, QLineEdit, QTextEdit,
    QComboBox, QDialogButtonBox
)

from app.config import Config, Vocabularies
from models.participant import Participant


class ParticipantDialog(QDialog):
    """Form for a new participant, or for editing an existing one."""

    def __init__(self, participant: Optional[Participant] = None, parent=None):
        super().__init__(parent)
        self._original = participant
        self.setWindowTitle("Edit Participant" if participant else "Add Participant")
        self.setMinimumWidth(460)
        self._setup_ui()
        if participant is not None:
            self._load(participant)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.name_input = QLineEdit()
        form.addRow("Full Name *:", self.name_input)

        self.ndis_number_input = QLineEdit()
        form.addRow("NDIS Number *:", self.ndis_number_input)

        self.email_input = QLineEdit()
        form.addRow("Email:", self.email_input)

        self.phone_input = QLineEdit()
        form.addRow("Phone:", self.phone_input)

        self.plan_start_input = QLineEdit()
        self.plan_start_input.setPlaceholderText("YYYY-MM-DD")
        form.addRow("Plan Start *:", self.plan_start_input)

        self.plan_end_input = QLineEdit()
        self.plan_end_input.setPlaceholderText("YYYY-MM-DD")
        form.addRow("Plan End *:", self.plan_end_input)

        self.coordinator_input = QLineEdit()
        form.addRow("Support Coordinator:", self.coordinator_input)

        self.status_combo = QComboBox()
        for value, label in Vocabularies.PARTICIPANT_STATUS:
            self.status_combo.addItem(label, value)
        form.addRow("Status:", self.status_combo)

        self.notes_input = QTextEdit()
        self.notes_input.setFixedHeight(70)
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

    def _load(self, participant: Participant):
        self.name_input.setText(participant.name or "")
        self.ndis_number_input.setText(participant.ndis_number or "")
        self.email_input.setText(participant.email or "")
        self.phone_input.setText(participant.phone or "")
        self.plan_start_input.setText(participant.plan_start_date or "")
        self.plan_end_input.setText(participant.plan_end_date or "")
        self.coordinator_input.setText(participant.support_coordinator or "")
        index = self.status_combo.findData(participant.status)
        if index >= 0:
            self.status_combo.setCurrentIndex(index)
        self.notes_input.setPlainText(participant.notes or "")

    def participant(self) -> Participant:
        """The participant as currently entered."""
        original = self._original
        return Participant(
            id=original.id if original else None,
            user_id=original.user_id if original else None,
            name=self.name_input.text().strip(),
            ndis_number=self.ndis_number_input.text().strip() or None,
            email=self.email_input.text().strip() or None,
            phone=self.phone_input.text().strip() or None,
            plan_start_date=self.plan_start_input.text().strip() or None,
            plan_end_date=self.plan_end_input.text().strip() or None,
            support_coordinator=self.coordinator_input.text().strip() or None,
            status=self.status_combo.currentData(),
            notes=self.notes_input.toPlainText().strip() or None,
        )

    def _on_accept(self):
        errors = self.participant().validate()
        if errors:
            self.error_label.setText(errors[0])
            self.error_label.setVisible(True)
            return
        self.accept()
