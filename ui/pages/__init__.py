# -*- coding: utf-8 -*-
"""
iDecide UI Pages
"""

from .records_page import RecordsPage
from .legal_documents_page import LegalDocumentsPage
from .service_agreements_page import (
    ParticipantsPage, ServiceAgreementsPage, ServiceProvidersPage
)
from .budget_page import BudgetPage

__all__ = [
    "RecordsPage",
    "LegalDocumentsPage",
    "ParticipantsPage",
    "ServiceAgreementsPage",
    "ServiceProvidersPage",
    "BudgetPage",
]
