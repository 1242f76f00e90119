# -*- coding: utf-8 -*-
"""
PDF export of wizard-created legal documents.

Renders a document's saved draft (the JSON ``content`` column) as a
printable summary: one section per top-level field, key/value tables for
nested objects and one table per list of objects.
"""

import hashlib
import re
from xml.sax.saxutils import escape
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.config import Config
from models.legal_document import LegalDocument
from services.exceptions import ValidationError
from utils.helpers import sanitize_filename
from utils.logger import get_logger

logger = get_logger(__name__)

HEADER_COLOR = "#1E3A8A"
ROW_ALT_COLOR = "#F8F9FA"

Section = Tuple[str, List[List[str]], bool]


def humanize(key: str) -> str:
    """``"firstName"`` / ``"first_name"`` -> ``"First Name"``."""
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", str(key)).replace("_", " ")
    return " ".join(word.capitalize() for word in spaced.split())


def _is_nested(value: Any) -> bool:
    return isinstance(value, dict) or (
        isinstance(value, list) and bool(value) and all(isinstance(v, dict) for v in value)
    )


def display(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return ", ".join(display(v) for v in value) or "-"
    return str(value)


def document_sections(content: Dict[str, Any]) -> List[Section]:
    """
    Split a draft into printable sections.

    Each section is (heading, rows, has_header). Rows are [label, value]
    pairs, except for lists of objects which become a header row plus one
    row per item.
    Scalar top-level fields are gathered into a leading "General" section.
    """
    general = []
    sections: List[Section] = []
    for key, value in content.items():
        if isinstance(value, dict):
            rows = [[humanize(k), display(v)] for k, v in value.items() if not _is_nested(v)]
            sections.append((humanize(key), rows, False))
            for sub_key, sub_value in value.items():
                if _is_nested(sub_value):
                    sections.extend(document_sections({f"{key} {sub_key}": sub_value}))
        elif _is_nested(value):
            columns = list(value[0].keys())
            rows = [[humanize(c) for c in columns]]
            rows.extend([display(item.get(c)) for c in columns] for item in value)
            sections.append((humanize(key), rows, True))
        else:
            general.append([humanize(key), display(value)])
    if general:
        sections.insert(0, ("General", general, False))
    return sections


class DocumentPdfService:
    """Writes legal documents to PDF files."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else Config.EXPORTS_DIR
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _styles(self) -> Dict[str, ParagraphStyle]:
        styles = getSampleStyleSheet()
        return {
            'title': ParagraphStyle(
                'DocTitle', parent=styles['Title'], fontSize=18, alignment=TA_CENTER
            ),
            'heading': ParagraphStyle(
                'DocHeading', parent=styles['Heading2'], fontSize=12
            ),
            'cell': ParagraphStyle(
                'DocCell', parent=styles['Normal'], fontSize=9
            ),
            'footer': ParagraphStyle(
                'DocFooter', parent=styles['Normal'], fontSize=8,
                alignment=TA_CENTER, textColor=colors.gray
            ),
        }

    def _table(self, rows: List[List[str]], header: bool, cell_style: ParagraphStyle) -> Table:
        data = [[Paragraph(escape(str(cell)), cell_style) for cell in row] for row in rows]
        width = 17 * cm / max(len(rows[0]), 1)
        table = Table(data, colWidths=[width] * len(rows[0]))
        commands = [
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor(Config.BORDER_COLOR)),
            ('ROWBACKGROUNDS', (0, 1 if header else 0), (-1, -1),
             [colors.white, colors.HexColor(ROW_ALT_COLOR)]),
        ]
        if header:
            commands.append(('BACKGROUND', (0, 0), (-1, 0), colors.HexColor(HEADER_COLOR)))
            commands.append(('TEXTCOLOR', (0, 0), (-1, 0), colors.white))
        table.setStyle(TableStyle(commands))
        return table

    def export(self, document: LegalDocument, file_path: Optional[Path] = None) -> Path:
        """
        Write ``document`` to a PDF file and return its path.

        Raises:
            ValidationError: the document is an uploaded file, not a draft
        """
        if document.is_uploaded:
            raise ValidationError(
                "Uploaded documents are already files; download them from storage instead",
                field="content",
            )

        if file_path is None:
            stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            file_path = self.output_dir / f"{sanitize_filename(document.title or 'document')}_{stamp}.pdf"
        file_path = Path(file_path)

        doc = SimpleDocTemplate(
            str(file_path),
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
            title=document.title,
        )
        styles = self._styles()
        story = [
            Paragraph(escape(document.title or document.type_display), styles['title']),
            Spacer(1, 0.5*cm),
        ]

        for heading, rows, has_header in document_sections(document.parsed_content):
            if not rows:
                continue
            story.append(Paragraph(escape(heading), styles['heading']))
            story.append(self._table(rows, header=has_header, cell_style=styles['cell']))
            story.append(Spacer(1, 0.4*cm))

        story.append(Spacer(1, 1*cm))
        story.append(Paragraph(
            f"Generated {datetime.now().strftime('%Y-%m-%d %H:%M')} | Status: {document.status}",
            styles['footer']
        ))

        doc.build(story)

        with open(file_path, 'rb') as f:
            checksum = hashlib.sha256(f.read()).hexdigest()
        logger.info(f"Exported {document.type} document {document.id} to {file_path} (sha256 {checksum[:12]})")
        return file_path