# -*- coding: utf-8 -*-
"""
Main application window with sidebar navigation and QStackedWidget routing.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QStackedWidget, QShortcut
)
from PyQt5.QtGui import QKeySequence

from .config import Config, Pages
from services.data_store import DataStore
from utils.logger import get_logger, set_log_user

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window with navigation shell."""

    def __init__(self, store: DataStore, user_id: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.store = store
        self.user_id = user_id
        set_log_user(user_id)

        self._setup_window()
        self._create_widgets()
        self._setup_layout()
        self._setup_shortcuts()

        self.sidebar.navigate.connect(self.navigate_to)
        self.sidebar.set_user(user_id)

        self.navigate_to(Pages.LEGAL_DOCUMENTS)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _create_widgets(self):
        """Create main UI components."""
        # Import here to avoid circular imports
        from ui.components.sidebar import Sidebar
        from ui.pages.legal_documents_page import LegalDocumentsPage
        from ui.pages.service_agreements_page import (
            ParticipantsPage, ServiceAgreementsPage, ServiceProvidersPage
        )
        from ui.pages.budget_page import BudgetPage

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)

        self.sidebar = Sidebar(self)
        self.stack = QStackedWidget()

        self.pages = {
            Pages.LEGAL_DOCUMENTS: LegalDocumentsPage(self.store, self.user_id, self),
            Pages.PARTICIPANTS: ParticipantsPage(self.store, self.user_id, self),
            Pages.SERVICE_PROVIDERS: ServiceProvidersPage(self.store, self.user_id, self),
            Pages.SERVICE_AGREEMENTS: ServiceAgreementsPage(self.store, self.user_id, self),
            Pages.BUDGET: BudgetPage(self.store, self.user_id, self),
        }
        for page in self.pages.values():
            self.stack.addWidget(page)

    def _setup_layout(self):
        main_layout = QHBoxLayout(self.central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.addWidget(self.sidebar, 0)
        main_layout.addWidget(self.stack, 1)

    def _setup_shortcuts(self):
        # Reload current page: F5
        self.refresh_shortcut = QShortcut(QKeySequence("F5"), self)
        self.refresh_shortcut.activated.connect(self.refresh_current)

    def navigate_to(self, page_id: str, data=None):
        """Navigate to a specific page."""
        if page_id not in self.pages:
            logger.error(f"Page not found: {page_id}")
            return

        page = self.pages[page_id]
        page.refresh(data)
        self.sidebar.set_selected(page_id)
        self.stack.setCurrentWidget(page)
        logger.debug(f"Navigated to: {page_id}")

    def current_page_id(self) -> Optional[str]:
        current = self.stack.currentWidget()
        for page_id, page in self.pages.items():
            if page is current:
                return page_id
        return None

    def refresh_current(self):
        page_id = self.current_page_id()
        if page_id:
            self.pages[page_id].refresh()

    def set_user(self, user_id: Optional[str]):
        """Switch the signed-in user and reload the current page."""
        self.user_id = user_id
        set_log_user(user_id)
        for page in self.pages.values():
            page.set_user(user_id)
        self.sidebar.set_user(user_id)
        self.refresh_current()
