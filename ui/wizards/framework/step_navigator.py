# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous)
- Direct jumps to a step
- Progress tracking

Steps are not validated on the way forward; required fields are only
checked when the wizard is submitted.
"""

from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_context import WizardSession
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Keep 0 <= current_index < step_count
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)

    def __init__(self, session: WizardSession):
        """
        Initialize the navigator.

        Args:
            session: Wizard session whose index is navigated
        """
        super().__init__()
        self.session = session

    @property
    def current_index(self) -> int:
        return self.session.current_step_index

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return self.session.step_count

    def can_go_next(self) -> bool:
        """Check if we can navigate to the next step."""
        return self.current_index < self.session.step_count - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.current_index > 0

    def next_step(self) -> bool:
        """
        Navigate to the next step.

        Returns:
            True if navigation happened, False at the last step
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def goto_step(self, index: int) -> bool:
        """
        Navigate to a specific step.

        Args:
            index: Target step index

        Returns:
            True if the index is valid
        """
        if index < 0 or index >= self.session.step_count:
            logger.warning(
                f"Invalid step index: {index} (valid range: 0-{self.session.step_count - 1})"
            )
            return False

        if index == self.current_index:
            return True

        return self._navigate_to(index)

    def _navigate_to(self, new_index: int) -> bool:
        """Move the session to ``new_index`` and announce it."""
        old_index = self.current_index
        self.session.set_step(new_index)

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

        logger.debug(f"Navigation complete: Step {new_index} is now active")
        return True

    def reset(self):
        """Reset navigator to first step."""
        self.goto_step(0)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if self.session.step_count <= 1:
            return 100.0
        return (self.current_index / (self.session.step_count - 1)) * 100.0
