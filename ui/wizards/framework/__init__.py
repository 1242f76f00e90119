# -*- coding: utf-8 -*-
"""
Wizard Framework - Unified Wizard System for iDecide.

Provides the pieces every document wizard is built from: the field
binder, step definitions, the wizard session and navigator, and the
definition base classes. The Qt view lives in wizard_view and is not
imported here.
"""

from .base_step import FieldKind, FieldSpec, StepDefinition, StepValidationResult
from .wizard_context import WizardSession
from .step_navigator import StepNavigator
from .wizard_definition import WizardDefinition, LegalDocumentWizard

__all__ = [
    'FieldKind',
    'FieldSpec',
    'StepDefinition',
    'StepValidationResult',
    'WizardSession',
    'StepNavigator',
    'WizardDefinition',
    'LegalDocumentWizard',
]
