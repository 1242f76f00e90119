# -*- coding: utf-8 -*-
"""
Legal document wizards: wills, trusts, powers of attorney and advance
directives.
"""

from .will_wizard import WillWizard
from .trust_wizard import TrustWizard
from .power_of_attorney_wizard import PowerOfAttorneyWizard
from .advance_directive_wizard import AdvanceDirectiveWizard

__all__ = [
    'WillWizard',
    'TrustWizard',
    'PowerOfAttorneyWizard',
    'AdvanceDirectiveWizard',
]
