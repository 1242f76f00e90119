# -*- coding: utf-8 -*-
"""
iDecide Controllers
===================
Controller layer between the Qt views and the data store.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Wizard session state and record list state

Usage:
    from controllers import WizardController, OperationResult

    controller = WizardController(WillWizard(), PersistenceAdapter(store))
    controller.open(user_id=user_id)
    ...
    result = controller.submit()
    if result.success:
        print(f"Saved: {result.data}")
    else:
        print(f"Error: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Domain controllers
from controllers.wizard_controller import (
    WizardController,
    WizardState,
)

from controllers.record_list_controller import (
    ListConfig,
    RecordListController,
)

__all__ = [
    'BaseController',
    'OperationResult',
    'WizardController',
    'WizardState',
    'ListConfig',
    'RecordListController',
]
