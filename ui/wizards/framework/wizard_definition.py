# -*- coding: utf-8 -*-
"""
Wizard Definition - what one kind of document wizard is made of.

A definition is stateless: it knows the initial draft template, how to
build the step table for a draft, which fields are required, and how a
finished draft maps onto a store row. The WizardController owns the
state; the PersistenceAdapter does the writing.
"""

import copy
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.config import Config
from models.document_kind import DocumentKind
from .base_step import OnChange, StepDefinition, StepValidationResult
from .field_binder import Draft, get_value


class WizardDefinition(ABC):
    """
    Abstract description of one document wizard.

    Subclasses must implement:
    - initial_template(): the empty draft
    - build_steps(): the step table for a draft
    - to_record(): the row inserted on submit
    """

    kind: DocumentKind = None
    title: str = ""
    reference_prefix: str = "WIZ"

    # Field paths that must be non-blank at submit, with their messages
    required_fields: Dict[str, str] = {}

    # Kinds created in several flavours (financial/medical POA, ...) name
    # the draft field holding the flavour and the allowed values
    variant_field: Optional[str] = None
    variants: List[str] = []

    @property
    @abstractmethod
    def table(self) -> str:
        """Store table the finished document is inserted into."""

    @abstractmethod
    def initial_template(self) -> Draft:
        """Return the draft a fresh wizard starts from."""

    def initial_draft(self, variant: Optional[str] = None) -> Draft:
        """A fresh copy of the template, optionally set to a variant."""
        draft = copy.deepcopy(self.initial_template())
        if variant is not None:
            if not self.variant_field or variant not in self.variants:
                raise ValueError(f"Unknown {self.kind.display_name} variant: {variant}")
            draft[self.variant_field] = variant
        return draft

    @abstractmethod
    def build_steps(self, draft: Draft, on_change: OnChange) -> List[StepDefinition]:
        """Build the ordered step table bound to ``draft``."""

    @abstractmethod
    def to_record(self, draft: Draft, user_id: str) -> Dict[str, Any]:
        """Map a finished draft onto the row to insert."""

    def step_count(self, draft: Optional[Draft] = None) -> int:
        """Number of steps; the table shape never depends on the draft."""
        return len(self.build_steps(draft or self.initial_draft(), _ignore_change))

    def validate(self, draft: Draft) -> StepValidationResult:
        """
        Check required fields before submit.

        The default checks ``required_fields``; kinds with richer rules
        override and call super().
        """
        result = StepValidationResult.ok()
        for path, message in self.required_fields.items():
            if _is_blank(get_value(draft, path)):
                result.add_error(message)
        return result


class LegalDocumentWizard(WizardDefinition):
    """
    Wizards whose documents land in the legal documents table.

    The whole draft is serialised into the ``content`` column. Existing
    documents can be uploaded instead of filled in.
    """

    # Sub-folder of the user's storage area for uploaded files
    upload_folder: str = ""

    @property
    def table(self) -> str:
        return Config.LEGAL_DOCUMENTS_TABLE

    @property
    def bucket(self) -> str:
        return Config.LEGAL_DOCUMENTS_BUCKET

    @abstractmethod
    def record_type(self, draft: Draft) -> str:
        """Value of the ``type`` column for a draft."""

    @abstractmethod
    def record_title(self, draft: Draft) -> str:
        """Value of the ``title`` column for a draft."""

    def to_record(self, draft: Draft, user_id: str) -> Dict[str, Any]:
        return {
            "user_id": user_id,
            "title": self.record_title(draft),
            "type": self.record_type(draft),
            "status": "draft",
            "content": json.dumps(draft),
        }

    # ==================== Upload existing document ====================

    def upload_variants(self) -> List[str]:
        """Document variants an uploaded file may be filed as."""
        return list(self.variants) or [self.record_type(self.initial_draft())]

    def upload_variant(self, variant: Optional[str] = None) -> str:
        """Resolve ``variant``; None picks the first one."""
        variants = self.upload_variants()
        if variant is None:
            return variants[0]
        if variant not in variants:
            raise ValueError(f"Unknown {self.kind.display_name} variant: {variant}")
        return variant

    def upload_type(self, variant: Optional[str] = None) -> str:
        """Value of the ``type`` column for an uploaded file."""
        return self.upload_variant(variant)

    def upload_title(self, file_name: str, variant: Optional[str] = None) -> str:
        """Title of the row recorded for an uploaded file."""
        return f"Uploaded {self.kind.display_name} - {file_name}"

    def upload_path(self, user_id: str, file_name: str, variant: Optional[str] = None) -> str:
        """Blob path: ``<user>/<folder>/<file name>``."""
        return f"{user_id}/{self.upload_folder}/{file_name}"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def _ignore_change(path, value):
    pass
