# -*- coding: utf-8 -*-
"""
Power of Attorney Wizard - financial or medical.
"""

from typing import List

from app.config import Vocabularies
from models.document_kind import DocumentKind
from ui.wizards.framework.base_step import (
    FieldKind, FieldSpec, OnChange, StepDefinition, bound, heading
)
from ui.wizards.framework.field_binder import Draft, get_value
from ui.wizards.framework.wizard_definition import LegalDocumentWizard

AGENT_TEMPLATE = {"name": "", "address": "", "phone": "", "email": "", "relationship": ""}


class PowerOfAttorneyWizard(LegalDocumentWizard):
    """Power of attorney; the granted powers depend on the variant."""

    kind = DocumentKind.POWER_OF_ATTORNEY
    title = "Create Power of Attorney"
    reference_prefix = "POA"
    upload_folder = "poa"

    variant_field = "type"
    variants = ["financial", "medical"]

    required_fields = {
        "principal.name": "Principal name is required",
        "agent.name": "Agent name is required",
    }

    def initial_template(self) -> Draft:
        return {
            "type": "financial",
            "principal": {"name": "", "address": "", "phone": "", "email": ""},
            "agent": dict(AGENT_TEMPLATE),
            "alternateAgent": dict(AGENT_TEMPLATE),
            "powers": [],
            "effectiveDate": "",
            "durability": True,
            "limitations": "",
            "revocation": "",
        }

    def record_type(self, draft: Draft) -> str:
        return "poa"

    def record_title(self, draft: Draft) -> str:
        return f"{_variant_label(get_value(draft, 'type'))} Power of Attorney"

    def upload_type(self, variant: str = None) -> str:
        self.upload_variant(variant)
        return "poa"

    def upload_title(self, file_name: str, variant: str = None) -> str:
        label = _variant_label(self.upload_variant(variant))
        return f"Uploaded {label} POA - {file_name}"

    def build_steps(self, draft: Draft, on_change: OnChange) -> List[StepDefinition]:
        return [
            StepDefinition("Principal Information", "The person granting the power", _principal),
            StepDefinition("Agent Information", "The person acting on your behalf", _agent),
            StepDefinition("Powers", "What your agent may do", _powers),
            StepDefinition("Terms and Conditions", "When and how the power applies", _terms),
        ]


def _variant_label(variant: str) -> str:
    return "Medical" if variant == "medical" else "Financial"


def available_powers(draft: Draft) -> List[str]:
    """Powers offered for the draft's variant."""
    if get_value(draft, "type") == "medical":
        return list(Vocabularies.MEDICAL_POWERS)
    return list(Vocabularies.FINANCIAL_POWERS)


def _principal(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "principal.name", "Full Legal Name", required=True),
        bound(draft, on_change, "principal.address", "Address"),
        bound(draft, on_change, "principal.phone", "Phone Number"),
        bound(draft, on_change, "principal.email", "Email Address"),
    ]


def _agent(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    fields = [heading("Primary Agent")]
    for prefix in ("agent", "alternateAgent"):
        if prefix == "alternateAgent":
            fields.append(heading("Alternate Agent"))
        fields.extend([
            bound(draft, on_change, f"{prefix}.name", "Full Name",
                  required=prefix == "agent"),
            bound(draft, on_change, f"{prefix}.address", "Address"),
            bound(draft, on_change, f"{prefix}.phone", "Phone Number"),
            bound(draft, on_change, f"{prefix}.email", "Email Address"),
            bound(draft, on_change, f"{prefix}.relationship", "Relationship to Principal"),
        ])
    return fields


def _powers(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "powers", "Granted Powers", FieldKind.MULTI_SELECT,
              options=[(power, power) for power in available_powers(draft)]),
    ]


def _terms(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "effectiveDate", "Effective Date",
              FieldKind.SELECT, options=Vocabularies.POA_EFFECTIVE),
        bound(draft, on_change, "durability",
              "Durable Power of Attorney (remains effective if principal becomes incapacitated)",
              FieldKind.CHECKBOX),
        bound(draft, on_change, "limitations", "Limitations and Restrictions",
              FieldKind.TEXTAREA,
              placeholder="Specify any limitations on the agent's powers..."),
        bound(draft, on_change, "revocation", "Revocation Terms",
              FieldKind.TEXTAREA,
              placeholder="Specify conditions under which this POA can be revoked..."),
    ]
