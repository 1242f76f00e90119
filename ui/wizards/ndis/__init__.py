# -*- coding: utf-8 -*-
"""NDIS plan management wizards."""

from .service_agreement_wizard import ServiceAgreementWizard

__all__ = ['ServiceAgreementWizard']
