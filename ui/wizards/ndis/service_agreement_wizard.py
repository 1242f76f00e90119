# -*- coding: utf-8 -*-
"""
Service Agreement Wizard - agreement between an NDIS participant and a
service provider.

Steps:
1. Participant & Provider
2. Services & Dates
3. Financial Details
"""

from typing import Any, Dict, List, Optional, Sequence

from app.config import Config, Vocabularies
from models.document_kind import DocumentKind
from models.participant import Participant
from models.service_agreement import ServiceAgreement
from models.service_provider import ServiceProvider
from ui.wizards.framework.base_step import (
    FieldKind, FieldSpec, OnChange, StepDefinition, StepValidationResult, bound
)
from ui.wizards.framework.field_binder import Draft, get_value
from ui.wizards.framework.wizard_definition import WizardDefinition
from utils.helpers import parse_amount, parse_date


class ServiceAgreementWizard(WizardDefinition):
    """
    Creates a service agreement row.

    The participants and providers offered in the first step are the ones
    loaded for the current user; their names are copied onto the row.
    """

    kind = DocumentKind.SERVICE_AGREEMENT
    title = "Create Service Agreement"
    reference_prefix = "AGR"

    def __init__(self, participants: Sequence[Participant] = (),
                 providers: Sequence[ServiceProvider] = ()):
        self.participants = list(participants)
        self.providers = list(providers)

    @property
    def table(self) -> str:
        return Config.SERVICE_AGREEMENTS_TABLE

    def initial_template(self) -> Draft:
        return {
            "participant_id": "",
            "provider_id": "",
            "start_date": "",
            "end_date": "",
            "total_amount": "",
            "services": [""],
            "status": "draft",
            "signed_date": "",
            "signed_by": "",
            "notes": "",
        }

    def build_steps(self, draft: Draft, on_change: OnChange) -> List[StepDefinition]:
        return [
            StepDefinition("Participant & Provider", "Who the agreement is between",
                           self._parties),
            StepDefinition("Services & Dates", "What is delivered and when",
                           _services_and_dates),
            StepDefinition("Financial Details", "Amount, status and signature",
                           _financial_details),
        ]

    def _parties(self, draft: Draft, on_change: OnChange) -> List[FieldSpec]:
        participant_options = [
            (p.id, f"{p.name} ({p.ndis_number})" if p.ndis_number else p.name)
            for p in self.participants
        ]
        provider_options = [(p.id, p.name) for p in self.providers]
        return [
            bound(draft, on_change, "participant_id", "Participant", FieldKind.SELECT,
                  options=participant_options, required=True),
            bound(draft, on_change, "provider_id", "Service Provider", FieldKind.SELECT,
                  options=provider_options, required=True),
        ]

    # ==================== Submit ====================

    def find_participant(self, participant_id: str) -> Optional[Participant]:
        return next((p for p in self.participants if p.id == participant_id), None)

    def find_provider(self, provider_id: str) -> Optional[ServiceProvider]:
        return next((p for p in self.providers if p.id == provider_id), None)

    def validate(self, draft: Draft) -> StepValidationResult:
        result = super().validate(draft)

        services = _filled_services(draft)
        if (not get_value(draft, "participant_id") or not get_value(draft, "provider_id")
                or not get_value(draft, "start_date") or not get_value(draft, "end_date")
                or not services):
            result.add_error("Please fill in all required fields")
            return result

        if (self.find_participant(get_value(draft, "participant_id")) is None
                or self.find_provider(get_value(draft, "provider_id")) is None):
            result.add_error("Invalid participant or provider selected")

        for path in ("start_date", "end_date", "signed_date"):
            value = get_value(draft, path)
            if value and parse_date(value) is None:
                result.add_error("Dates must be entered as YYYY-MM-DD")
                break

        return result

    def to_record(self, draft: Draft, user_id: str) -> Dict[str, Any]:
        participant = self.find_participant(get_value(draft, "participant_id"))
        provider = self.find_provider(get_value(draft, "provider_id"))
        agreement = ServiceAgreement.from_dict({
            "user_id": user_id,
            "participant_id": participant.id if participant else None,
            "participant_name": participant.name if participant else "",
            "provider_id": provider.id if provider else None,
            "provider_name": provider.name if provider else "",
            "start_date": get_value(draft, "start_date"),
            "end_date": get_value(draft, "end_date"),
            "total_amount": parse_amount(get_value(draft, "total_amount")),
            "services": _filled_services(draft),
            "status": get_value(draft, "status") or "draft",
            "signed_date": get_value(draft, "signed_date"),
            "signed_by": get_value(draft, "signed_by") or None,
            "notes": get_value(draft, "notes") or None,
        })
        row = agreement.to_dict()
        row.pop("id")
        return row


def _filled_services(draft: Draft) -> List[str]:
    """Services with blank entries dropped."""
    return [s for s in get_value(draft, "services", []) or [] if s and s.strip()]


def _services_and_dates(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(
            draft, on_change, "services", "Services", FieldKind.LIST,
            item_label="Service",
            item_template="",
            min_items=1,
            required=True,
            # Plain string items: the item field edits the item itself
            item_fields=[FieldSpec("Service", (), placeholder="e.g., Personal Care")],
        ),
        bound(draft, on_change, "start_date", "Start Date", FieldKind.DATE, required=True),
        bound(draft, on_change, "end_date", "End Date", FieldKind.DATE, required=True),
    ]


def _financial_details(draft: Draft, on_change: OnChange) -> List[FieldSpec]:
    return [
        bound(draft, on_change, "total_amount", "Total Amount", FieldKind.NUMBER,
              required=True, placeholder="0.00"),
        bound(draft, on_change, "status", "Status", FieldKind.SELECT,
              options=Vocabularies.AGREEMENT_STATUS),
        bound(draft, on_change, "signed_date", "Signed Date", FieldKind.DATE),
        bound(draft, on_change, "signed_by", "Signed By"),
        bound(draft, on_change, "notes", "Notes", FieldKind.TEXTAREA),
    ]
