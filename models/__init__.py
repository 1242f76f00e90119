# -*- coding: utf-8 -*-
"""
iDecide Data Models
"""

from .document_kind import DocumentKind
from .legal_document import LegalDocument
from .service_agreement import ServiceAgreement
from .participant import Participant
from .service_provider import ServiceProvider
from .budget import BudgetCategory, Transaction, percent_used

__all__ = [
    "DocumentKind",
    "LegalDocument",
    "ServiceAgreement",
    "Participant",
    "ServiceProvider",
    "BudgetCategory",
    "Transaction",
    "percent_used",
]
