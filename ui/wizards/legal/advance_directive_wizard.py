# -*- coding: utf-8 -*-
"""
Advance Directive Wizard - living will or healthcare directive.
"""

from typing import List

from app.config import Vocabularies
from models.document_kind import DocumentKind
from ui.wizards.framework.base_step import (
    FieldKind, FieldSpec, OnChange, StepDefinition, bound
)
from ui.wizards.framework.field_binder import Draft, get_value
from ui.wizards.framework.wizard_definition import LegalDocumentWizard

_LABELS = {
    "living_will": "Living Will",
    "healthcare_directive": "Healthcare Directive",
}


class AdvanceDirectiveWizard(LegalDocumentWizard):
    """Records medical treatment wishes."""

    kind = DocumentKind.ADVANCE_DIRECTIVE
    title = "Create Advance Directive"
    reference_prefix = "DIR"
    upload_folder = "directives"

    variant_field = "type"
    variants = ["living_will", "healthcare_directive"]

    required_fields = {
        "principal.name": "Full legal name is required",
    }

    def initial_template(self) -> Draft:
        return {
            "type": "living_will",
            "principal": {"name": "", "address": "", "phone": "", "birthdate": ""},
            "medicalPreferences": {
                "lifeSustaining": "",
                "artificialNutrition": "",
                "painManagement": "",
                "organDonation": "",
                "otherInstructions": "",
            },
            "terminalConditions": {"preferences": [], "specificInstructions": ""},
            "mentalHealth": {"preferences": "", "medications": "", "treatments": ""},
            "additionalInstructions": "",
        }

    def record_type(self, draft: Draft) -> str:
        return get_value(draft, "type") or "living_will"

    def record_title(self, draft: Draft) -> str:
        return _LABELS.get(self.record_type(draft), "Living Will")

    def upload_title(self, file_name: str, variant: str = None) -> str:
        return f"Uploaded {_LABELS[self.upload_variant(variant)]} - {file_name}"

    def build_steps(self, draft: Draft, on_change: OnChange) -> List[StepDefinition]:
        return [
            StepDefinition("Personal Information", "Who this directive is for", _personal),
            StepDefinition("Medical Preferences", "Treatment you do or do not want", _medical),
            StepDefinition("Terminal Conditions", "Wishes if your condition is terminal", _terminal),
            StepDefinition("Mental Health Care", "Preferences for mental health treatment", _mental_health),
            StepDefinition("Additional Instructions", "Anything else your carers should know", _additional),
        ]


def _personal(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "principal.name", "Full Legal Name", required=True),
        bound(draft, on_change, "principal.address", "Address"),
        bound(draft, on_change, "principal.phone", "Phone Number"),
        bound(draft, on_change, "principal.birthdate", "Date of Birth", FieldKind.DATE),
    ]


def _medical(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "medicalPreferences.lifeSustaining",
              "Life-Sustaining Treatment", FieldKind.SELECT,
              options=Vocabularies.LIFE_SUSTAINING),
        bound(draft, on_change, "medicalPreferences.artificialNutrition",
              "Artificial Nutrition and Hydration", FieldKind.SELECT,
              options=Vocabularies.ARTIFICIAL_NUTRITION),
        bound(draft, on_change, "medicalPreferences.painManagement",
              "Pain Management Preferences", FieldKind.TEXTAREA,
              placeholder="Specify your preferences for pain management..."),
        bound(draft, on_change, "medicalPreferences.organDonation",
              "Organ Donation", FieldKind.SELECT,
              options=Vocabularies.ORGAN_DONATION),
    ]


def _terminal(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "terminalConditions.preferences",
              "Treatment Preferences", FieldKind.MULTI_SELECT,
              options=[(p, p) for p in Vocabularies.TERMINAL_PREFERENCES]),
        bound(draft, on_change, "terminalConditions.specificInstructions",
              "Specific Instructions", FieldKind.TEXTAREA,
              placeholder="Provide specific instructions for terminal conditions..."),
    ]


def _mental_health(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "mentalHealth.preferences", "General Preferences",
              FieldKind.TEXTAREA),
        bound(draft, on_change, "mentalHealth.medications", "Medication Preferences",
              FieldKind.TEXTAREA),
        bound(draft, on_change, "mentalHealth.treatments", "Treatment Preferences",
              FieldKind.TEXTAREA),
    ]


def _additional(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "additionalInstructions", "Other Wishes or Instructions",
              FieldKind.TEXTAREA,
              placeholder="Provide any additional instructions or wishes not covered in previous sections..."),
    ]
