# -*- coding: utf-8 -*-
"""
Side navigation bar.
"""

from PyQt5.QtWidgets import (
    QVBoxLayout, QLabel, QPushButton, QSpacerItem, QSizePolicy, QFrame
)
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config, Pages
from utils.helpers import truncate_text

# Page id, label
NAV_ITEMS = [
    (Pages.LEGAL_DOCUMENTS, "Legal Documents"),
    (Pages.PARTICIPANTS, "Participants"),
    (Pages.SERVICE_PROVIDERS, "Service Providers"),
    (Pages.SERVICE_AGREEMENTS, "Service Agreements"),
    (Pages.BUDGET, "Budget"),
]


class Sidebar(QFrame):
    """Side navigation bar."""

    navigate = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._buttons = {}
        self._selected_page = None

        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("sidebar")
        self.setFixedWidth(Config.SIDEBAR_WIDTH)
        self.setStyleSheet(f"""
            QFrame#sidebar {{
                background-color: {Config.SIDEBAR_COLOR};
                border: none;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addSpacing(24)

        app_label = QLabel(Config.APP_NAME)
        app_label.setStyleSheet(f"""
            color: white;
            font-weight: 700;
            font-size: {Config.FONT_SIZE + 6}pt;
            padding: 0 18px 18px 18px;
            background: transparent;
        """)
        layout.addWidget(app_label)

        for page_id, label in NAV_ITEMS:
            btn = self._create_nav_button(page_id, label)
            layout.addWidget(btn)
            self._buttons[page_id] = btn

        layout.addSpacerItem(QSpacerItem(20, 40, QSizePolicy.Minimum, QSizePolicy.Expanding))

        self.user_label = QLabel("")
        self.user_label.setWordWrap(True)
        self.user_label.setStyleSheet(f"""
            color: {Config.ACCENT_COLOR};
            font-size: {Config.FONT_SIZE_SMALL}pt;
            padding: 14px 18px;
            background: transparent;
        """)
        layout.addWidget(self.user_label)

    def _create_nav_button(self, page_id: str, label: str) -> QPushButton:
        btn = QPushButton(label)
        btn.setCheckable(True)
        btn.setCursor(Qt.PointingHandCursor)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                color: rgba(255, 255, 255, 0.8);
                border: none;
                text-align: left;
                padding: 12px 18px;
                font-size: {Config.FONT_SIZE + 1}pt;
                border-left: 3px solid transparent;
                border-radius: 0;
            }}
            QPushButton:hover {{
                background-color: rgba(255, 255, 255, 0.08);
                color: white;
            }}
            QPushButton:checked {{
                background-color: rgba(255, 255, 255, 0.12);
                border-left: 3px solid {Config.ACCENT_COLOR};
                color: white;
                font-weight: 600;
            }}
        """)
        btn.clicked.connect(lambda checked, pid=page_id: self._on_nav_click(pid))
        return btn

    def _on_nav_click(self, page_id: str):
        self.set_selected(page_id)
        self.navigate.emit(page_id)

    def set_selected(self, page_id: str):
        """Mark the active page."""
        self._selected_page = page_id
        for pid, btn in self._buttons.items():
            btn.setChecked(pid == page_id)

    @property
    def selected_page(self):
        return self._selected_page

    def set_user(self, user_id):
        """Show who is signed in."""
        self.user_label.setText(f"Signed in as {truncate_text(user_id, 28)}" if user_id else "Not signed in")
