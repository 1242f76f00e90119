# -*- coding: utf-8 -*-
"""
Will Wizard - Last Will and Testament.

Steps:
1. Personal Information
2. Executor Details
3. Beneficiaries
4. Specific Bequests
5. Final Wishes
"""

from typing import List

from app.config import Vocabularies
from models.document_kind import DocumentKind
from ui.wizards.framework.base_step import (
    FieldKind, FieldSpec, OnChange, StepDefinition, bound, heading
)
from ui.wizards.framework.field_binder import Draft, get_value
from ui.wizards.framework.wizard_definition import LegalDocumentWizard

BENEFICIARY_TEMPLATE = {"name": "", "relationship": "", "share": ""}
BEQUEST_TEMPLATE = {"item": "", "recipient": "", "description": ""}
PERSON_TEMPLATE = {"name": "", "address": "", "relationship": ""}


class WillWizard(LegalDocumentWizard):
    """Creates a will; uploads file existing wills or trusts."""

    kind = DocumentKind.WILL
    title = "Create Your Will"
    reference_prefix = "WIL"
    upload_folder = "wills"

    required_fields = {
        "testator.name": "Testator name is required",
    }

    def initial_template(self) -> Draft:
        return {
            "testator": {"name": "", "address": "", "maritalStatus": ""},
            "executor": dict(PERSON_TEMPLATE),
            "alternateExecutor": dict(PERSON_TEMPLATE),
            "beneficiaries": [dict(BENEFICIARY_TEMPLATE)],
            "guardians": [],
            "specificBequests": [],
            "residualEstate": {"distribution": "equal", "charities": []},
            "finalWishes": {"funeral": "", "burial": "", "organDonation": ""},
        }

    def record_type(self, draft: Draft) -> str:
        return "will"

    def record_title(self, draft: Draft) -> str:
        return f"Last Will and Testament - {get_value(draft, 'testator.name', '')}"

    def upload_variants(self) -> List[str]:
        # The wills page also files existing trusts
        return ["will", "trust"]

    def upload_title(self, file_name: str, variant: str = None) -> str:
        label = "Trust" if self.upload_type(variant) == "trust" else "Will"
        return f"Uploaded {label} - {file_name}"

    def upload_path(self, user_id: str, file_name: str, variant: str = None) -> str:
        return f"{user_id}/{self.upload_type(variant)}s/{file_name}"

    def build_steps(self, draft: Draft, on_change: OnChange) -> List[StepDefinition]:
        return [
            StepDefinition(
                "Personal Information",
                "Tell us about yourself",
                _personal_information,
            ),
            StepDefinition(
                "Executor Details",
                "Choose who will carry out your wishes",
                _executor_details,
            ),
            StepDefinition(
                "Beneficiaries",
                "Who will inherit your estate",
                _beneficiaries,
            ),
            StepDefinition(
                "Specific Bequests",
                "Leave particular items to particular people",
                _specific_bequests,
            ),
            StepDefinition(
                "Final Wishes",
                "Funeral, burial and organ donation",
                _final_wishes,
            ),
        ]


def _personal_information(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "testator.name", "Full Legal Name", required=True),
        bound(draft, on_change, "testator.address", "Current Address"),
        bound(draft, on_change, "testator.maritalStatus", "Marital Status",
              FieldKind.SELECT, options=Vocabularies.MARITAL_STATUS),
    ]


def _executor_details(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        heading("Primary Executor"),
        bound(draft, on_change, "executor.name", "Full Name"),
        bound(draft, on_change, "executor.address", "Address"),
        bound(draft, on_change, "executor.relationship", "Relationship"),
        heading("Alternate Executor"),
        bound(draft, on_change, "alternateExecutor.name", "Full Name"),
        bound(draft, on_change, "alternateExecutor.address", "Address"),
        bound(draft, on_change, "alternateExecutor.relationship", "Relationship"),
    ]


def _beneficiaries(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(
            draft, on_change, "beneficiaries", "Beneficiaries", FieldKind.LIST,
            item_label="Beneficiary",
            item_template=BENEFICIARY_TEMPLATE,
            min_items=1,
            item_fields=[
                FieldSpec("Full Name", ("name",)),
                FieldSpec("Relationship", ("relationship",)),
                FieldSpec("Share", ("share",), placeholder="e.g., 25% or specific amount"),
            ],
        ),
    ]


def _specific_bequests(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(
            draft, on_change, "specificBequests", "Specific Bequests", FieldKind.LIST,
            item_label="Bequest",
            item_template=BEQUEST_TEMPLATE,
            item_fields=[
                FieldSpec("Item", ("item",)),
                FieldSpec("Recipient", ("recipient",)),
                FieldSpec("Description", ("description",), kind=FieldKind.TEXTAREA),
            ],
        ),
    ]


def _final_wishes(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "finalWishes.funeral", "Funeral Arrangements",
              FieldKind.TEXTAREA,
              placeholder="Describe your preferred funeral arrangements..."),
        bound(draft, on_change, "finalWishes.burial", "Burial or Cremation",
              FieldKind.TEXTAREA,
              placeholder="Specify your burial or cremation preferences..."),
        bound(draft, on_change, "finalWishes.organDonation", "Organ Donation",
              FieldKind.SELECT, options=Vocabularies.WILL_ORGAN_DONATION),
    ]
