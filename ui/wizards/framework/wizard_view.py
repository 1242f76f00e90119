# -*- coding: utf-8 -*-
"""
Wizard View - Qt front end of a WizardController.

Provides unified wizard UI with:
- Header with title and progress
- Form built from the current step's FieldSpec list
- Navigation buttons (Cancel, Back, Continue / Save)
- Error banner

The view owns no state: every input writes through the controller and
the form is rebuilt when the step or the shape of a list changes.
"""

import copy
from dataclasses import replace
from typing import Callable, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QProgressBar, QLineEdit, QPlainTextEdit, QComboBox, QCheckBox,
    QScrollArea, QFormLayout, QGroupBox, QDialog
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QDoubleValidator, QFont

from app.config import Config
from controllers.wizard_controller import WizardController, WizardState
from .base_step import FieldKind, FieldSpec
from .field_binder import get_value
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardView(QWidget):
    """
    Widget showing one wizard.

    Signals are re-emitted from the controller so pages need not know
    about it.
    """

    # Signals
    wizard_completed = pyqtSignal(str)  # record id
    wizard_cancelled = pyqtSignal()

    def __init__(self, controller: WizardController, parent: Optional[QWidget] = None):
        """Initialize the wizard view."""
        super().__init__(parent)
        self.controller = controller
        self._field_widgets = {}

        self.controller.step_changed.connect(self._on_step_changed)
        self.controller.error_changed.connect(self._on_error_changed)
        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.submitted.connect(self.wizard_completed.emit)
        self.controller.cancelled.connect(self.wizard_cancelled.emit)

        self._setup_ui()
        if self.controller.is_active:
            self.refresh()

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            f"color: {Config.ERROR_COLOR}; background-color: #FEF2F2; padding: 8px;"
        )
        self.error_label.setVisible(False)
        main_layout.addWidget(self.error_label)

        # Step form
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        main_layout.addWidget(self.scroll_area, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title and progress."""
        header = QWidget()
        header.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
            }
        """)

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(self.controller.definition.title)
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.step_title_label = QLabel("")
        step_font = QFont()
        step_font.setPointSize(12)
        step_font.setBold(True)
        self.step_title_label.setFont(step_font)
        layout.addWidget(self.step_title_label)

        self.step_description_label = QLabel("")
        self.step_description_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.step_description_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel("")
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)
        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = QPushButton("Back")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton("Continue")
        self.btn_next.setDefault(True)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh(self):
        """Rebuild header, form and buttons from the controller."""
        if not self.controller.is_active:
            return
        step = self.controller.current_step
        self.step_title_label.setText(step.title)
        self.step_description_label.setText(step.description)
        self._render_form()
        self._update_progress()
        self._update_navigation_buttons()
        self._on_error_changed(self.controller.error)

    def _render_form(self):
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        form = QFormLayout()
        self._field_widgets = {}
        for field in self.controller.current_fields():
            if field.kind == FieldKind.HEADING:
                layout.addLayout(form)
                layout.addWidget(self._create_heading(field))
                form = QFormLayout()
            elif field.kind == FieldKind.LIST:
                layout.addLayout(form)
                layout.addWidget(self._create_list(field))
                form = QFormLayout()
            else:
                widget = self._create_input(field)
                self._field_widgets[field.path] = widget
                form.addRow(self._label_text(field), widget)
        layout.addLayout(form)
        layout.addStretch()

        # The old form may own the button whose click triggered this
        old = self.scroll_area.takeWidget()
        if old is not None:
            old.deleteLater()
        self.scroll_area.setWidget(container)

    def field_widget(self, path) -> Optional[QWidget]:
        """Input widget bound to ``path`` on the current step."""
        return self._field_widgets.get(tuple(path))

    @staticmethod
    def _label_text(field: FieldSpec) -> str:
        return f"{field.label}*" if field.required else field.label

    @staticmethod
    def _create_heading(field: FieldSpec) -> QLabel:
        label = QLabel(field.label)
        font = QFont()
        font.setBold(True)
        label.setFont(font)
        return label

    def _create_input(self, field: FieldSpec) -> QWidget:
        """Widget for one scalar field; edits write through ``field.set``."""
        kind = field.kind

        if kind == FieldKind.TEXTAREA:
            widget = QPlainTextEdit()
            widget.setPlainText(field.value or "")
            widget.setPlaceholderText(field.placeholder)
            widget.setFixedHeight(90)
            widget.textChanged.connect(lambda w=widget, f=field: f.set(w.toPlainText()))
            return widget

        if kind == FieldKind.SELECT:
            widget = QComboBox()
            widget.addItem("Select...", "")
            for value, label in field.options:
                widget.addItem(label, value)
            index = widget.findData(field.value)
            widget.setCurrentIndex(index if index >= 0 else 0)
            widget.currentIndexChanged.connect(
                lambda i, w=widget, f=field: f.set(w.itemData(i))
            )
            return widget

        if kind == FieldKind.CHECKBOX:
            widget = QCheckBox()
            widget.setChecked(bool(field.value))
            widget.toggled.connect(field.set)
            return widget

        if kind == FieldKind.MULTI_SELECT:
            return self._create_multi_select(field)

        widget = QLineEdit()
        widget.setText("" if field.value is None else str(field.value))
        widget.setPlaceholderText(field.placeholder)
        if kind == FieldKind.DATE:
            widget.setPlaceholderText(field.placeholder or "YYYY-MM-DD")
        elif kind == FieldKind.NUMBER:
            widget.setValidator(QDoubleValidator(0.0, 1e12, 2, widget))
        widget.textChanged.connect(field.set)
        return widget

    def _create_multi_select(self, field: FieldSpec) -> QWidget:
        box = QWidget()
        layout = QVBoxLayout(box)
        layout.setContentsMargins(0, 0, 0, 0)
        selected = field.value or []
        for value, label in field.options:
            check = QCheckBox(label)
            check.setChecked(value in selected)
            check.toggled.connect(
                lambda _checked, v=value, p=field.path: self.controller.toggle_in(p, v)
            )
            layout.addWidget(check)
        return box

    def _create_list(self, field: FieldSpec) -> QWidget:
        """Group with one sub-form per list item plus add/remove buttons."""
        group = QGroupBox(self._label_text(field))
        layout = QVBoxLayout(group)
        items = field.value or []

        for index, item in enumerate(items):
            item_box = QFrame()
            item_box.setFrameShape(QFrame.StyledPanel)
            item_layout = QFormLayout(item_box)

            for sub in field.item_fields:
                bound_sub = replace(
                    sub,
                    path=field.item_path(index, sub.path),
                    value=get_value(item, sub.path) if sub.path else item,
                    on_change=self.controller.edit,
                )
                widget = self._create_input(bound_sub)
                self._field_widgets[bound_sub.path] = widget
                item_layout.addRow(self._label_text(bound_sub), widget)

            btn_remove = QPushButton(f"Remove {field.item_label or 'item'}")
            btn_remove.setEnabled(len(items) > field.min_items)
            btn_remove.clicked.connect(self._list_action(
                lambda p=field.path, i=index: self.controller.remove_at(p, i)
            ))
            item_layout.addRow(btn_remove)
            layout.addWidget(item_box)

        btn_add = QPushButton(f"Add {field.item_label or 'item'}")
        btn_add.clicked.connect(self._list_action(
            lambda p=field.path, t=field.item_template: self.controller.append_to(p, copy.deepcopy(t))
        ))
        layout.addWidget(btn_add)
        return group

    def _list_action(self, action: Callable[[], None]) -> Callable[[], None]:
        def run(*_args):
            action()
            self._render_form()
        return run

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.controller.back()

    def _handle_next(self):
        if self.controller.is_last_step():
            self._handle_submit()
        else:
            self.controller.next()

    def _handle_cancel(self):
        self.controller.cancel()

    def _handle_submit(self):
        """Submit; the button stays disabled while the save is in flight."""
        if self.controller.is_submitting:
            return
        self.btn_next.setEnabled(False)
        self.btn_next.setText("Saving...")
        try:
            self.controller.submit()
        finally:
            if self.controller.is_active:
                self._update_navigation_buttons()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        self.refresh()

    def _on_state_changed(self, state: str):
        if state == WizardState.ACTIVE.value:
            self.refresh()

    def _on_error_changed(self, message: str):
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def _update_progress(self):
        current = self.controller.current_index + 1
        total = self.controller.step_count
        self.progress_label.setText(f"Step {current} of {total}")
        self.progress_bar.setValue(int(self.controller.progress()))

    def _update_navigation_buttons(self):
        self.btn_previous.setEnabled(self.controller.can_go_back())
        self.btn_next.setEnabled(not self.controller.is_submitting)
        if self.controller.is_last_step():
            self.btn_next.setText("Save Document")
        else:
            self.btn_next.setText("Continue")


class WizardDialog(QDialog):
    """Modal window hosting a WizardView; closes when the wizard does."""

    def __init__(self, controller: WizardController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle(controller.definition.title)
        self.setMinimumSize(640, 560)
        self.record_id: Optional[str] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.view = WizardView(controller, self)
        layout.addWidget(self.view)

        self.view.wizard_completed.connect(self._on_completed)
        self.view.wizard_cancelled.connect(self.reject)

    def _on_completed(self, record_id: str):
        self.record_id = record_id
        self.accept()

    def reject(self):
        # Closing the window cancels the wizard and drops the draft
        self.view.controller.cancel()
        super().reject()
