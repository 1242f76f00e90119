# -*- coding: utf-8 -*-
"""
Document kinds handled by the wizards.
"""

from enum import Enum


class DocumentKind(Enum):
    """Kinds of documents a wizard can create."""
    WILL = "will"
    TRUST = "trust"
    POWER_OF_ATTORNEY = "poa"
    ADVANCE_DIRECTIVE = "directive"
    SERVICE_AGREEMENT = "service_agreement"

    @property
    def display_name(self) -> str:
        names = {
            DocumentKind.WILL: "Will",
            DocumentKind.TRUST: "Trust",
            DocumentKind.POWER_OF_ATTORNEY: "Power of Attorney",
            DocumentKind.ADVANCE_DIRECTIVE: "Advance Directive",
            DocumentKind.SERVICE_AGREEMENT: "Service Agreement",
        }
        return names[self]

    @property
    def is_legal(self) -> bool:
        """Legal kinds are stored in the legal documents table."""
        return self is not DocumentKind.SERVICE_AGREEMENT
