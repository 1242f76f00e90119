# -*- coding: utf-8 -*-
"""
Legal documents page: list of the user's wills, trusts, powers of
attorney and advance directives, with wizards to create new ones and
upload of existing files.
"""

from typing import Optional

from PyQt5.QtWidgets import QPushButton, QMenu, QFileDialog

from controllers.record_list_controller import LEGAL_DOCUMENTS, RecordListController
from controllers.wizard_controller import WizardController
from models.legal_document import LegalDocument
from services.data_store import DataStore
from services.display_mappings import get_document_type_display
from services.document_pdf_service import DocumentPdfService
from services.persistence_adapter import PersistenceAdapter
from ui.error_handler import ErrorHandler
from ui.pages.records_page import RecordsPage
from ui.wizards.framework.wizard_view import WizardDialog
from ui.wizards.legal import (
    AdvanceDirectiveWizard, PowerOfAttorneyWizard, TrustWizard, WillWizard
)
from utils.helpers import format_date, parse_date
from utils.logger import get_logger

logger = get_logger(__name__)

# Menu label, wizard class, variant
CREATE_ACTIONS = [
    ("Will", WillWizard, None),
    ("Trust", TrustWizard, None),
    ("Financial Power of Attorney", PowerOfAttorneyWizard, "financial"),
    ("Medical Power of Attorney", PowerOfAttorneyWizard, "medical"),
    ("Living Will", AdvanceDirectiveWizard, "living_will"),
    ("Healthcare Directive", AdvanceDirectiveWizard, "healthcare_directive"),
]

UPLOAD_ACTIONS = [
    ("Will", WillWizard, "will"),
    ("Trust", WillWizard, "trust"),
    ("Financial Power of Attorney", PowerOfAttorneyWizard, "financial"),
    ("Medical Power of Attorney", PowerOfAttorneyWizard, "medical"),
    ("Living Will", AdvanceDirectiveWizard, "living_will"),
    ("Healthcare Directive", AdvanceDirectiveWizard, "healthcare_directive"),
]

COLUMNS = [
    ("title", "Title"),
    ("type", "Type"),
    ("status", "Status"),
    ("created_at", "Created"),
]


def _format_created(value) -> str:
    parsed = parse_date(value[:10] if isinstance(value, str) else value)
    return format_date(parsed) if parsed else "-"


class LegalDocumentsPage(RecordsPage):
    """Legal documents list with create and upload menus."""

    def __init__(self, store: DataStore, user_id: Optional[str] = None, parent=None):
        self.store = store
        self.adapter = PersistenceAdapter(store)
        super().__init__(
            RecordListController(store, LEGAL_DOCUMENTS),
            "Legal Documents",
            COLUMNS,
            user_id=user_id,
            formatters={
                "type": get_document_type_display,
                "created_at": _format_created,
            },
            status_key="status",
            parent=parent,
        )

    def _create_actions(self) -> list:
        self.btn_create = QPushButton("New Document")
        create_menu = QMenu(self)
        for label, wizard_class, variant in CREATE_ACTIONS:
            action = create_menu.addAction(label)
            action.triggered.connect(
                lambda checked=False, w=wizard_class, v=variant: self.open_wizard(w(), v)
            )
        self.btn_create.setMenu(create_menu)

        self.btn_upload = QPushButton("Upload Existing")
        upload_menu = QMenu(self)
        for label, wizard_class, variant in UPLOAD_ACTIONS:
            action = upload_menu.addAction(label)
            action.triggered.connect(
                lambda checked=False, w=wizard_class, v=variant: self.upload_document(w(), v)
            )
        self.btn_upload.setMenu(upload_menu)

        self.btn_export = QPushButton("Export PDF")
        self.btn_export.clicked.connect(lambda: self.export_selected())

        return [self.btn_create, self.btn_upload, self.btn_export]

    def open_wizard(self, definition, variant: Optional[str] = None) -> Optional[str]:
        """Run a document wizard; reload the list when it saves."""
        controller = WizardController(definition, self.adapter, self)
        controller.open(user_id=self.user_id, variant=variant)
        dialog = WizardDialog(controller, self)
        dialog.exec_()
        if dialog.record_id:
            ErrorHandler.show_success(self, "Document saved")
            self.refresh()
        return dialog.record_id

    def upload_document(self, definition, variant: Optional[str] = None,
                        file_path: Optional[str] = None) -> Optional[str]:
        """Upload an existing file as a document of the chosen kind."""
        if file_path is None:
            file_path, _ = QFileDialog.getOpenFileName(
                self, "Choose Document", "", "PDF Documents (*.pdf)"
            )
        if not file_path:
            return None
        try:
            record_id = self.adapter.upload_existing(definition, file_path, self.user_id, variant)
        except Exception as e:
            ErrorHandler.handle(e, self, context="upload")
            return None
        ErrorHandler.show_success(self, "Document uploaded")
        self.refresh()
        return record_id

    def export_selected(self, file_path: Optional[str] = None) -> Optional[str]:
        """Write the selected wizard-created document to a PDF file."""
        record = self.selected_record()
        if record is None:
            ErrorHandler.show_warning(self, "Select a document to export")
            return None
        document = LegalDocument.from_dict(record)
        if file_path is None:
            file_path, _ = QFileDialog.getSaveFileName(
                self, "Export Document", f"{document.title or 'document'}.pdf",
                "PDF Documents (*.pdf)"
            )
            if not file_path:
                return None
        try:
            path = DocumentPdfService().export(document, file_path)
        except Exception as e:
            ErrorHandler.handle(e, self, context="export")
            return None
        ErrorHandler.show_success(self, f"Exported to {path}")
        return str(path)
