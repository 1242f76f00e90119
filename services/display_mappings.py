# -*- coding: utf-8 -*-
"""
Centralized display mappings for status/type dictionaries (DRY).

Each status maps to a badge colour role; views turn roles into actual
colours through BADGE_COLORS.
"""

from app.config import Vocabularies


# ============ Colour roles ============

GREEN = "green"
BLUE = "blue"
YELLOW = "yellow"
RED = "red"
GRAY = "gray"
PURPLE = "purple"
AMBER = "amber"

# role -> (background, foreground)
BADGE_COLORS = {
    GREEN: ("#DCFCE7", "#166534"),
    BLUE: ("#DBEAFE", "#1E40AF"),
    YELLOW: ("#FEF9C3", "#854D0E"),
    RED: ("#FEE2E2", "#991B1B"),
    GRAY: ("#F3F4F6", "#1F2937"),
    PURPLE: ("#F3E8FF", "#6B21A8"),
    AMBER: ("#FEF3C7", "#92400E"),
}


def _role(mapping: dict, key) -> str:
    if key is None:
        return GRAY
    return mapping.get(str(key).lower(), GRAY)


def badge_colors(role: str) -> tuple:
    """(background, foreground) hex colours of a role."""
    return BADGE_COLORS.get(role, BADGE_COLORS[GRAY])


# ============ Service Agreement Status ============

def get_agreement_status_color(status) -> str:
    return _role({
        "active": GREEN,
        "draft": BLUE,
        "expired": GRAY,
        "cancelled": RED,
    }, status)


def get_agreement_status_display(status) -> str:
    return dict(Vocabularies.AGREEMENT_STATUS).get(status, status or "")


# ============ Transaction Status ============

def get_transaction_status_color(status) -> str:
    return _role({
        "processed": GREEN,
        "pending": YELLOW,
        "cancelled": RED,
    }, status)


def get_transaction_status_display(status) -> str:
    return dict(Vocabularies.TRANSACTION_STATUS).get(status, status or "")


# ============ Participant Status ============

def get_participant_status_color(status) -> str:
    return _role({
        "active": GREEN,
        "pending": YELLOW,
        "inactive": GRAY,
    }, status)


# ============ Provider Agreement Status ============

def get_provider_status_color(status) -> str:
    return _role({
        "active": GREEN,
        "pending": YELLOW,
        "expired": RED,
    }, status)


# ============ Budget Category ============

def get_budget_category_color(category) -> str:
    # Categories are title case ("Capacity Building")
    return {
        "Core": BLUE,
        "Capacity Building": PURPLE,
        "Capital": AMBER,
    }.get(category, GRAY)


# ============ Legal Document Type ============

def get_document_type_display(doc_type) -> str:
    return {
        "will": "Will",
        "trust": "Trust",
        "poa": "Power of Attorney",
        "living_will": "Living Will",
        "healthcare_directive": "Healthcare Directive",
    }.get(doc_type, doc_type or "")


def get_document_status_color(status) -> str:
    return _role({
        "active": GREEN,
        "draft": BLUE,
    }, status)


# Status colour lookups per list, keyed by ListConfig name
STATUS_COLORS = {
    "legal_documents": get_document_status_color,
    "service_agreements": get_agreement_status_color,
    "participants": get_participant_status_color,
    "service_providers": get_provider_status_color,
    "transactions": get_transaction_status_color,
}
