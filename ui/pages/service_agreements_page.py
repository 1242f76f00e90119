# -*- coding: utf-8 -*-
"""
Service agreements page.

New agreements pick their participant and provider from the user's
current participant and provider lists, which are kept on their own pages
with add and edit forms.
"""

from typing import List, Optional

from PyQt5.QtWidgets import QDialog, QPushButton

from controllers.record_list_controller import (
    PARTICIPANTS, SERVICE_AGREEMENTS, SERVICE_PROVIDERS, RecordListController
)
from controllers.wizard_controller import WizardController
from models.participant import Participant
from models.service_provider import ServiceProvider
from services.data_store import DataStore
from services.display_mappings import get_agreement_status_display
from services.persistence_adapter import PersistenceAdapter
from ui.components.dialogs import ParticipantDialog, ProviderDialog
from ui.error_handler import ErrorHandler
from ui.pages.records_page import RecordsPage
from ui.wizards.framework.wizard_view import WizardDialog
from ui.wizards.ndis import ServiceAgreementWizard
from utils.helpers import format_currency, format_date

COLUMNS = [
    ("participant_name", "Participant"),
    ("provider_name", "Provider"),
    ("services", "Services"),
    ("start_date", "Start"),
    ("end_date", "End"),
    ("total_amount", "Total"),
    ("status", "Status"),
]

PARTICIPANT_COLUMNS = [
    ("name", "Name"),
    ("ndis_number", "NDIS Number"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("plan_end_date", "Plan Ends"),
    ("status", "Status"),
]

PROVIDER_COLUMNS = [
    ("name", "Name"),
    ("services", "Services"),
    ("contact_name", "Contact"),
    ("email", "Email"),
    ("agreement_status", "Agreement"),
]


class ServiceAgreementsPage(RecordsPage):
    """Service agreements list with the create wizard."""

    def __init__(self, store: DataStore, user_id: Optional[str] = None, parent=None):
        self.store = store
        self.adapter = PersistenceAdapter(store)
        self.participants = RecordListController(store, PARTICIPANTS)
        self.providers = RecordListController(store, SERVICE_PROVIDERS)
        super().__init__(
            RecordListController(store, SERVICE_AGREEMENTS),
            "Service Agreements",
            COLUMNS,
            user_id=user_id,
            formatters={
                "start_date": format_date,
                "end_date": format_date,
                "total_amount": format_currency,
                "status": get_agreement_status_display,
            },
            parent=parent,
        )

    def _create_actions(self) -> list:
        self.btn_create = QPushButton("New Agreement")
        self.btn_create.clicked.connect(lambda: self.open_wizard())
        return [self.btn_create]

    def build_wizard(self) -> ServiceAgreementWizard:
        """Wizard offering the user's current participants and providers."""
        participants: List[Participant] = []
        providers: List[ServiceProvider] = []
        if self.participants.load(self.user_id).success:
            participants = [Participant.from_dict(r) for r in self.participants.records]
        if self.providers.load(self.user_id).success:
            providers = [ServiceProvider.from_dict(r) for r in self.providers.records]
        return ServiceAgreementWizard(participants, providers)

    def open_wizard(self) -> Optional[str]:
        if not self.user_id:
            ErrorHandler.show_warning(self, "Sign in to create an agreement")
            return None
        controller = WizardController(self.build_wizard(), self.adapter, self)
        controller.open(user_id=self.user_id)
        dialog = WizardDialog(controller, self)
        dialog.exec_()
        if dialog.record_id:
            ErrorHandler.show_success(self, "Service agreement created")
            self.refresh()
        return dialog.record_id


class ParticipantsPage(RecordsPage):
    """NDIS participants (one per NDIS plan), with add and edit forms."""

    def __init__(self, store: DataStore, user_id: Optional[str] = None, parent=None):
        super().__init__(
            RecordListController(store, PARTICIPANTS),
            "Participants",
            PARTICIPANT_COLUMNS,
            user_id=user_id,
            formatters={"plan_end_date": format_date},
            parent=parent,
        )
        self.record_selected.connect(lambda record: self.edit_participant())

    def _create_actions(self) -> list:
        self.btn_add = QPushButton("Add Participant")
        self.btn_add.clicked.connect(lambda: self.add_participant())
        self.btn_edit = QPushButton("Edit")
        self.btn_edit.clicked.connect(lambda: self.edit_participant())
        return [self.btn_add, self.btn_edit]

    def add_participant(self, participant: Optional[Participant] = None) -> Optional[str]:
        """Create a participant (and its NDIS plan) from the form or the one given."""
        if not self.user_id:
            ErrorHandler.show_warning(self, "Sign in to add a participant")
            return None
        if participant is None:
            dialog = ParticipantDialog(parent=self)
            if dialog.exec_() != QDialog.Accepted:
                return None
            participant = dialog.participant()
        errors = participant.validate()
        if errors:
            ErrorHandler.show_warning(self, errors[0])
            return None

        result = self.controller.create(participant.to_policy_row(self.user_id), self.user_id)
        if not result.success:
            ErrorHandler.show_error(self, result.message)
            return None
        ErrorHandler.show_success(self, "Participant added")
        return result.data.get("id")

    def edit_participant(self, participant: Optional[Participant] = None) -> bool:
        """Save changes to the selected participant (or the one given)."""
        if participant is None:
            record = self.selected_record()
            if record is None:
                ErrorHandler.show_warning(self, "Select a participant to edit")
                return False
            dialog = ParticipantDialog(Participant.from_dict(record), self)
            if dialog.exec_() != QDialog.Accepted:
                return False
            participant = dialog.participant()
        errors = participant.validate()
        if errors:
            ErrorHandler.show_warning(self, errors[0])
            return False

        result = self.controller.update(
            participant.id, participant.to_policy_patch(), user_id=self.user_id
        )
        if not result.success:
            ErrorHandler.show_error(self, result.message)
            return False
        ErrorHandler.show_success(self, "Participant updated")
        return True


class ServiceProvidersPage(RecordsPage):
    """Service providers directory, with add and edit forms."""

    def __init__(self, store: DataStore, user_id: Optional[str] = None, parent=None):
        super().__init__(
            RecordListController(store, SERVICE_PROVIDERS),
            "Service Providers",
            PROVIDER_COLUMNS,
            user_id=user_id,
            parent=parent,
        )
        self.record_selected.connect(lambda record: self.edit_provider())

    def _create_actions(self) -> list:
        self.btn_add = QPushButton("Add Provider")
        self.btn_add.clicked.connect(lambda: self.add_provider())
        self.btn_edit = QPushButton("Edit")
        self.btn_edit.clicked.connect(lambda: self.edit_provider())
        return [self.btn_add, self.btn_edit]

    def add_provider(self, provider: Optional[ServiceProvider] = None) -> Optional[str]:
        """Create a provider from the form or the one given."""
        if not self.user_id:
            ErrorHandler.show_warning(self, "Sign in to add a provider")
            return None
        if provider is None:
            dialog = ProviderDialog(parent=self)
            if dialog.exec_() != QDialog.Accepted:
                return None
            provider = dialog.provider()
        errors = provider.validate()
        if errors:
            ErrorHandler.show_warning(self, errors[0])
            return None

        result = self.controller.create(provider.to_row(self.user_id), self.user_id)
        if not result.success:
            ErrorHandler.show_error(self, result.message)
            return None
        ErrorHandler.show_success(self, "Provider added")
        return result.data.get("id")

    def edit_provider(self, provider: Optional[ServiceProvider] = None) -> bool:
        """Save changes to the selected provider (or the one given)."""
        if provider is None:
            record = self.selected_record()
            if record is None:
                ErrorHandler.show_warning(self, "Select a provider to edit")
                return False
            dialog = ProviderDialog(ServiceProvider.from_dict(record), self)
            if dialog.exec_() != QDialog.Accepted:
                return False
            provider = dialog.provider()
        errors = provider.validate()
        if errors:
            ErrorHandler.show_warning(self, errors[0])
            return False

        result = self.controller.update(
            provider.id, provider.to_row(self.user_id), user_id=self.user_id
        )
        if not result.success:
            ErrorHandler.show_error(self, result.message)
            return False
        ErrorHandler.show_success(self, "Provider updated")
        return True
