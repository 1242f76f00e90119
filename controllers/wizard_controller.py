# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
Drives one document wizard from open to cancel or submit.

States:
    IDLE                 no wizard open, no draft
    ACTIVE(step, draft)  wizard open at ``step`` editing ``draft``

Transitions:
    open      IDLE -> ACTIVE(0, initial draft)
    cancel    ACTIVE -> IDLE, draft discarded
    submit    ACTIVE -> IDLE on success; stays ACTIVE at the same step with
              an error message on failure

Steps are not validated while navigating. Required fields are checked
by the wizard definition at submit.
"""

from enum import Enum
from typing import Any, List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from services.exceptions import WizardStateError
from services.persistence_adapter import PersistenceAdapter
from ui.wizards.framework import field_binder
from ui.wizards.framework.base_step import FieldSpec, StepDefinition
from ui.wizards.framework.field_binder import Draft, FieldPath
from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.framework.wizard_context import WizardSession
from ui.wizards.framework.wizard_definition import WizardDefinition
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardState(Enum):
    """Controller state."""
    IDLE = "idle"
    ACTIVE = "active"


class WizardController(BaseController):
    """
    Controller for a single wizard instance.

    Only one wizard can be open per controller. The draft is replaced
    (never mutated) on every edit; ``draft_changed`` fires after each.
    """

    # Signals
    state_changed = pyqtSignal(str)  # WizardState value
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    draft_changed = pyqtSignal()
    error_changed = pyqtSignal(str)
    submitted = pyqtSignal(str)  # record id
    cancelled = pyqtSignal()

    def __init__(self, definition: WizardDefinition, adapter: PersistenceAdapter,
                 parent=None):
        super().__init__(parent)
        self.definition = definition
        self.adapter = adapter
        self._session: Optional[WizardSession] = None
        self._navigator: Optional[StepNavigator] = None
        self._is_submitting = False

    # ==================== State ====================

    @property
    def state(self) -> WizardState:
        return WizardState.ACTIVE if self._session is not None else WizardState.IDLE

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[WizardSession]:
        return self._session

    @property
    def draft(self) -> Optional[Draft]:
        """Current draft; None while idle."""
        return self._session.draft if self._session else None

    @property
    def current_index(self) -> int:
        return self._session.current_step_index if self._session else 0

    @property
    def error(self) -> str:
        return self._session.error if self._session else ""

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def steps(self) -> List[StepDefinition]:
        """Step table bound to the current draft."""
        self._require_active("read steps")
        return self.definition.build_steps(self._session.draft, self.edit)

    @property
    def step_count(self) -> int:
        return self._session.step_count if self._session else self.definition.step_count()

    @property
    def current_step(self) -> StepDefinition:
        return self.steps[self.current_index]

    def current_fields(self) -> List[FieldSpec]:
        """Render the current step against the current draft."""
        return self.current_step.fields(self._session.draft, self.edit)

    def can_go_next(self) -> bool:
        return self._navigator is not None and self._navigator.can_go_next()

    def can_go_back(self) -> bool:
        return self._navigator is not None and self._navigator.can_go_previous()

    def is_last_step(self) -> bool:
        return self._session is not None and self._session.is_last_step

    def progress(self) -> float:
        return self._navigator.get_progress_percentage() if self._navigator else 0.0

    def _require_active(self, operation: str):
        if self._session is None:
            raise WizardStateError(f"Cannot {operation}: no wizard is open")

    # ==================== Lifecycle ====================

    def open(self, initial_draft: Optional[Draft] = None, user_id: Optional[str] = None,
             variant: Optional[str] = None):
        """
        Open the wizard at step 0.

        Args:
            initial_draft: Draft to start from; defaults to the kind's template
            user_id: Owner the document will be saved for
            variant: Template variant (e.g. "medical" for a POA)
        """
        if self._session is not None:
            raise WizardStateError("A wizard is already open; cancel or submit it first")

        draft = initial_draft if initial_draft is not None else self.definition.initial_draft(variant)
        step_count = len(self.definition.build_steps(draft, self.edit))

        self._session = WizardSession(
            draft, step_count, user_id=user_id,
            prefix=self.definition.reference_prefix
        )
        self._navigator = StepNavigator(self._session)
        self._navigator.step_changed.connect(self.step_changed)

        logger.info(
            f"Opened {self.definition.kind.value} wizard {self._session.reference_number} "
            f"({step_count} steps)"
        )
        self.state_changed.emit(WizardState.ACTIVE.value)
        self.draft_changed.emit()

    def cancel(self):
        """Close the wizard and discard the draft. No-op when idle."""
        if self._session is None:
            return
        logger.info(f"Cancelled wizard {self._session.reference_number}")
        self._close(WizardSession.CANCELLED)
        self.cancelled.emit()

    def _close(self, status: str):
        self._session.status = status
        self._session = None
        self._navigator = None
        self.state_changed.emit(WizardState.IDLE.value)

    # ==================== Navigation ====================

    def next(self) -> bool:
        """Advance one step; no-op (False) at the last step."""
        self._require_active("go to the next step")
        return self._navigator.next_step()

    def back(self) -> bool:
        """Go back one step; no-op (False) at the first step."""
        self._require_active("go back")
        return self._navigator.previous_step()

    def goto(self, index: int) -> bool:
        """Jump to a step; False when the index is out of range."""
        self._require_active("change step")
        return self._navigator.goto_step(index)

    # ==================== Editing ====================

    def edit(self, path: FieldPath, value: Any):
        """Set one field of the draft."""
        self._require_active("edit")
        self._apply(field_binder.bind(self._session.draft, path, value))

    def insert_at(self, path: FieldPath, index: Optional[int], value: Any):
        """Insert into a list field; index None appends."""
        self._require_active("edit")
        self._apply(field_binder.insert_at(self._session.draft, path, index, value))

    def append_to(self, path: FieldPath, value: Any):
        self.insert_at(path, None, value)

    def remove_at(self, path: FieldPath, index: int):
        """Remove an item of a list field."""
        self._require_active("edit")
        self._apply(field_binder.remove_at(self._session.draft, path, index))

    def replace_at(self, path: FieldPath, index: int, value: Any):
        """Replace an item of a list field."""
        self._require_active("edit")
        self._apply(field_binder.replace_at(self._session.draft, path, index, value))

    def toggle_in(self, path: FieldPath, value: Any):
        """Add or remove a member of a multi-select field."""
        self._require_active("edit")
        self._apply(field_binder.toggle_in(self._session.draft, path, value))

    def _apply(self, draft: Draft):
        self._session.replace_draft(draft)
        self.draft_changed.emit()

    def _set_session_error(self, message: str):
        self._session.error = message
        self.error_changed.emit(message)

    # ==================== Submit ====================

    def submit(self, user_id: Optional[str] = None) -> OperationResult:
        """
        Validate and save the draft.

        On success the wizard closes and ``submitted`` fires with the new
        record id. On failure the wizard stays open at the same step with
        the error message set. A call made while a submit is in flight is
        refused.

        Args:
            user_id: Owner to save for; defaults to the one given to open()
        """
        self._require_active("submit")
        if self._is_submitting:
            return OperationResult.fail("A save is already in progress")
        if not self._session.is_last_step:
            raise WizardStateError("Submit is only available on the last step")

        session = self._session
        owner = user_id or session.user_id
        self._set_session_error("")

        validation = self.definition.validate(session.draft)
        if not validation.is_valid:
            message = "\n".join(validation.errors)
            logger.info(f"Submit of {session.reference_number} rejected: {validation.errors}")
            self._set_session_error(message)
            return OperationResult.fail(message, errors=list(validation.errors))

        self._is_submitting = True
        session.status = WizardSession.SUBMITTING
        self._log_operation("submit", reference=session.reference_number, user_id=owner)
        try:
            result = self.execute_with_error_handling(
                "save", self.adapter.save, self.definition, session.draft, owner
            )
        finally:
            self._is_submitting = False

        if not result.success:
            session.status = WizardSession.IN_PROGRESS
            self._set_session_error(result.message)
            return result

        record_id = result.data
        logger.info(f"Submitted {session.reference_number} as record {record_id}")
        self._close(WizardSession.COMPLETED)
        self.submitted.emit(record_id)
        return result
