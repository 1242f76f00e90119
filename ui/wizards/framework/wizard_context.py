# -*- coding: utf-8 -*-
"""
Wizard Session - state of one open wizard.

Holds:
- the draft being edited
- the current step index
- status and last error
- a reference number for logs
"""

from typing import Dict, Any, Optional
from datetime import datetime
import uuid

from .field_binder import Draft


class WizardSession:
    """
    State of one wizard from open until cancel or successful submit.

    The draft is replaced wholesale on every edit (see field_binder);
    the session never mutates it in place.
    """

    IN_PROGRESS = "in_progress"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def __init__(self, draft: Draft, step_count: int, user_id: Optional[str] = None,
                 prefix: str = "WIZ"):
        """Initialize session properties."""
        if step_count < 1:
            raise ValueError("A wizard needs at least one step")
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = self.IN_PROGRESS
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.step_count: int = step_count
        self.user_id: Optional[str] = user_id
        self.error: str = ""
        self.draft: Draft = draft
        self._prefix = prefix
        self.reference_number: str = self._generate_reference_number()

        # Steps the user has seen
        self.visited_steps: set = {0}

    def _generate_reference_number(self) -> str:
        """
        Generate a reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: WIL-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"{self._prefix}-{timestamp}-{short_id}"

    @property
    def is_last_step(self) -> bool:
        return self.current_step_index == self.step_count - 1

    def set_step(self, index: int):
        """Move to a step; index must be in range."""
        if index < 0 or index >= self.step_count:
            raise IndexError(f"Step index {index} out of range 0-{self.step_count - 1}")
        self.current_step_index = index
        self.visited_steps.add(index)
        self.updated_at = datetime.now()

    def replace_draft(self, draft: Draft):
        """Install the next version of the draft."""
        self.draft = draft
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session to dictionary."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "step_count": self.step_count,
            "user_id": self.user_id,
            "visited_steps": sorted(self.visited_steps),
            "error": self.error,
            "draft": self.draft,
        }
