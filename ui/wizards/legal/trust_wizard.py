# -*- coding: utf-8 -*-
"""
Trust Wizard - builds a living or irrevocable trust.
"""

from typing import List

from app.config import Vocabularies
from models.document_kind import DocumentKind
from ui.wizards.framework.base_step import (
    FieldKind, FieldSpec, OnChange, StepDefinition, bound
)
from ui.wizards.framework.field_binder import Draft, get_value
from ui.wizards.framework.wizard_definition import LegalDocumentWizard

# Trustees added after the first one are successors
TRUSTEE_TEMPLATE = {"name": "", "address": "", "relationship": "", "type": "successor"}
BENEFICIARY_TEMPLATE = {"name": "", "relationship": "", "share": ""}
ASSET_TEMPLATE = {"type": "", "description": "", "value": ""}


class TrustWizard(LegalDocumentWizard):
    """Seven-step trust builder."""

    kind = DocumentKind.TRUST
    title = "Create a Trust"
    reference_prefix = "TRU"
    upload_folder = "trusts"

    required_fields = {
        "trustDetails.name": "Trust name is required",
    }

    def initial_template(self) -> Draft:
        return {
            "trustDetails": {"name": "", "type": "revocable", "purpose": ""},
            "trustor": {"name": "", "address": "", "maritalStatus": ""},
            "trustees": [dict(TRUSTEE_TEMPLATE, type="primary")],
            "beneficiaries": [dict(BENEFICIARY_TEMPLATE)],
            "assets": [dict(ASSET_TEMPLATE)],
            "distributions": {"schedule": "", "conditions": ""},
            "powerOfTrustee": {
                "investmentPowers": False,
                "distributionPowers": False,
                "amendmentPowers": False,
                "additionalPowers": "",
            },
        }

    def record_type(self, draft: Draft) -> str:
        return "trust"

    def record_title(self, draft: Draft) -> str:
        return get_value(draft, "trustDetails.name", "")

    def build_steps(self, draft: Draft, on_change: OnChange) -> List[StepDefinition]:
        return [
            StepDefinition("Trust Details", "Name and purpose of the trust", _trust_details),
            StepDefinition("Trustor Information", "The person creating the trust", _trustor),
            StepDefinition("Trustees", "Who will manage the trust", _trustees),
            StepDefinition("Trust Assets", "What the trust will hold", _assets),
            StepDefinition("Beneficiaries", "Who the trust benefits", _beneficiaries),
            StepDefinition("Distribution Terms", "When and how assets are distributed", _distributions),
            StepDefinition("Trustee Powers", "What the trustees may do", _trustee_powers),
        ]


def _trust_details(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "trustDetails.name", "Trust Name", required=True,
              placeholder="e.g., Smith Family Living Trust"),
        bound(draft, on_change, "trustDetails.type", "Trust Type",
              FieldKind.SELECT, options=Vocabularies.TRUST_TYPES),
        bound(draft, on_change, "trustDetails.purpose", "Trust Purpose",
              FieldKind.TEXTAREA,
              placeholder="Describe the primary purpose of this trust..."),
    ]


def _trustor(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "trustor.name", "Full Legal Name"),
        bound(draft, on_change, "trustor.address", "Current Address"),
        bound(draft, on_change, "trustor.maritalStatus", "Marital Status",
              FieldKind.SELECT, options=Vocabularies.MARITAL_STATUS),
    ]


def _trustees(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(
            draft, on_change, "trustees", "Trustees", FieldKind.LIST,
            item_label="Trustee",
            item_template=TRUSTEE_TEMPLATE,
            item_fields=[
                FieldSpec("Trustee Type", ("type",), kind=FieldKind.SELECT,
                          options=Vocabularies.TRUSTEE_TYPES),
                FieldSpec("Full Name", ("name",)),
                FieldSpec("Address", ("address",)),
                FieldSpec("Relationship to Trustor", ("relationship",)),
            ],
        ),
    ]


def _assets(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(
            draft, on_change, "assets", "Trust Assets", FieldKind.LIST,
            item_label="Asset",
            item_template=ASSET_TEMPLATE,
            item_fields=[
                FieldSpec("Asset Type", ("type",), kind=FieldKind.SELECT,
                          options=Vocabularies.ASSET_TYPES),
                FieldSpec("Description", ("description",), kind=FieldKind.TEXTAREA,
                          placeholder="Provide detailed description of the asset..."),
                FieldSpec("Approximate Value", ("value",), placeholder="e.g., $500,000"),
                FieldSpec("Additional Notes", ("notes",), kind=FieldKind.TEXTAREA),
            ],
        ),
    ]


def _beneficiaries(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(
            draft, on_change, "beneficiaries", "Beneficiaries", FieldKind.LIST,
            item_label="Beneficiary",
            item_template=BENEFICIARY_TEMPLATE,
            item_fields=[
                FieldSpec("Full Name", ("name",)),
                FieldSpec("Relationship", ("relationship",)),
                FieldSpec("Share of Trust", ("share",),
                          placeholder="e.g., 25% or specific amount"),
                FieldSpec("Distribution Schedule", ("distributionSchedule",),
                          kind=FieldKind.TEXTAREA),
                FieldSpec("Conditions", ("conditions",), kind=FieldKind.TEXTAREA,
                          placeholder="Any conditions that must be met (e.g., age, education)..."),
            ],
        ),
    ]


def _distributions(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "distributions.schedule", "Distribution Schedule",
              FieldKind.TEXTAREA),
        bound(draft, on_change, "distributions.conditions", "Distribution Conditions",
              FieldKind.TEXTAREA),
        bound(draft, on_change, "distributions.spendingProvisions", "Spending Provisions",
              FieldKind.TEXTAREA),
    ]


def _trustee_powers(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "powerOfTrustee.investmentPowers",
              "Authority to make investment decisions for trust assets",
              FieldKind.CHECKBOX),
        bound(draft, on_change, "powerOfTrustee.distributionPowers",
              "Authority to make distributions according to trust terms",
              FieldKind.CHECKBOX),
        bound(draft, on_change, "powerOfTrustee.amendmentPowers",
              "Authority to amend trust terms (typically for revocable trusts only)",
              FieldKind.CHECKBOX),
        bound(draft, on_change, "powerOfTrustee.additionalPowers", "Additional Powers",
              FieldKind.TEXTAREA),
    ]
