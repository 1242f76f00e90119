# -*- coding: utf-8 -*-
"""
Unit tests for the legal document PDF export.

Tests cover:
- Field name humanizing and value display
- Splitting a saved draft into printable sections
- Writing a PDF file
- Refusing uploaded documents
"""

import json

import pytest

from models.legal_document import LegalDocument
from services.document_pdf_service import (
    DocumentPdfService, display, document_sections, humanize
)
from services.exceptions import ValidationError
from ui.wizards.framework.field_binder import bind
from ui.wizards.legal import WillWizard


class TestHelpers:
    """Tests for humanize() and display()."""

    def test_humanize(self):
        """Test camelCase and snake_case keys become title words."""
        assert humanize("maritalStatus") == "Marital Status"
        assert humanize("plan_end_date") == "Plan End Date"
        assert humanize("name") == "Name"

    def test_display(self):
        """Test blank, boolean and list values."""
        assert display(None) == "-"
        assert display("") == "-"
        assert display(True) == "Yes"
        assert display(["Banking", "Property"]) == "Banking, Property"
        assert display([]) == "-"


class TestDocumentSections:
    """Tests for document_sections()."""

    def test_sections(self):
        """Test scalars, objects and lists of objects are split apart."""
        content = {
            "type": "medical",
            "principal": {"name": "Jane Doe", "address": ""},
            "beneficiaries": [
                {"name": "Tom", "share": "50"},
                {"name": "Ann", "share": "50"},
            ],
        }

        sections = document_sections(content)

        assert sections[0] == ("General", [["Type", "medical"]], False)
        assert sections[1] == ("Principal", [["Name", "Jane Doe"], ["Address", "-"]], False)
        heading, rows, has_header = sections[2]
        assert heading == "Beneficiaries"
        assert has_header is True
        assert rows == [["Name", "Share"], ["Tom", "50"], ["Ann", "50"]]

    def test_nested_list_in_object(self):
        """Test a list of objects inside an object gets its own section."""
        content = {"residualEstate": {"distribution": "custom",
                                      "shares": [{"name": "Tom", "share": "100"}]}}

        headings = [s[0] for s in document_sections(content)]

        assert headings == ["Residual Estate", "Residual Estate Shares"]


class TestExport:
    """Tests for DocumentPdfService.export()."""

    def test_export_writes_pdf(self, tmp_path):
        """Test a wizard draft is written to a PDF file."""
        wizard = WillWizard()
        draft = bind(wizard.initial_draft(), "testator.name", "Jane Doe")
        document = LegalDocument(
            id="doc-1",
            title=wizard.record_title(draft),
            type="will",
            content=json.dumps(draft),
        )

        path = DocumentPdfService(output_dir=tmp_path).export(document)

        assert path.parent == tmp_path
        assert path.suffix == ".pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_export_to_given_path(self, tmp_path):
        """Test an explicit file path is used as is."""
        document = LegalDocument(title="Trust", type="trust", content=json.dumps({"name": "Family"}))
        target = tmp_path / "trust.pdf"

        path = DocumentPdfService(output_dir=tmp_path).export(document, target)

        assert path == target
        assert target.exists()

    def test_uploaded_document_rejected(self, tmp_path):
        """Test uploaded documents cannot be exported."""
        document = LegalDocument(title="Uploaded Will - a.pdf", type="will",
                                 content=json.dumps({"file_path": "u/wills/a.pdf"}))

        with pytest.raises(ValidationError):
            DocumentPdfService(output_dir=tmp_path).export(document)
