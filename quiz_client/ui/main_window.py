"""Qt main window switching between the account, quiz and admin views."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from quiz_client.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from quiz_client.constants.ui_constants import WINDOW_TITLE
from quiz_client.core.auth_session import AuthSession
from quiz_client.core.models import AuthState, AuthUser, QuizSettings, ResultSummary
from quiz_client.core.quiz_manager import QuizManager
from quiz_client.ui.components.admin_panel import AdminPanel
from quiz_client.ui.components.dashboard_panel import DashboardPanel
from quiz_client.ui.components.login_panel import LoginPanel
from quiz_client.ui.components.nav_bar import NavBar
from quiz_client.ui.components.quiz_panel import QuizPanel
from quiz_client.ui.components.register_panel import RegisterPanel
from quiz_client.ui.components.result_panel import ResultPanel
from quiz_client.ui.dialog_helpers import show_info
from quiz_client.styling.styles import Styles

logger = logging.getLogger(__name__)


class View(Enum):
    """Top-level pages of the client."""

    LOGIN = auto()
    REGISTER = auto()
    DASHBOARD = auto()
    QUIZ = auto()
    RESULT = auto()
    ADMIN = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window owning the navigation bar and page stack."""

    def __init__(self, quiz_manager: QuizManager, auth: AuthSession) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1100, 760)

        self.quiz_manager = quiz_manager
        self.auth = auth
        self._view = View.DASHBOARD

        self._build_ui()
        self._apply_styles()
        self.auth.add_listener(self._handle_auth_changed)
        self.nav_bar.update_state(self.auth.state)
        self._show_home()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.nav_bar = NavBar(
            on_home=self._show_home,
            on_admin=lambda: self._set_view(View.ADMIN),
            on_login=lambda: self._set_view(View.LOGIN),
            on_register=lambda: self._set_view(View.REGISTER),
            on_logout=self._handle_logout,
            on_about=self._handle_about,
            parent=self,
        )
        root_layout.addWidget(self.nav_bar)

        self.view_stack = QStackedWidget(self)

        self.login_panel = LoginPanel(
            self.auth,
            on_logged_in=self._handle_signed_in,
            on_show_register=lambda: self._set_view(View.REGISTER),
            parent=self,
        )
        self.register_panel = RegisterPanel(
            self.auth,
            on_registered=self._handle_signed_in,
            on_show_login=lambda: self._set_view(View.LOGIN),
            parent=self,
        )
        self.dashboard_panel = DashboardPanel(
            self.quiz_manager,
            on_start_quiz=self._handle_start_quiz,
            on_login_requested=lambda: self._set_view(View.LOGIN),
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            self.quiz_manager,
            on_finished=self._handle_quiz_finished,
            on_back_to_dashboard=lambda: self._set_view(View.DASHBOARD),
            parent=self,
        )
        self.result_panel = ResultPanel(
            on_back_to_dashboard=lambda: self._set_view(View.DASHBOARD),
            parent=self,
        )
        self.admin_panel = AdminPanel(self.quiz_manager, self)

        self._pages = {
            View.LOGIN: self.login_panel,
            View.REGISTER: self.register_panel,
            View.DASHBOARD: self.dashboard_panel,
            View.QUIZ: self.quiz_panel,
            View.RESULT: self.result_panel,
            View.ADMIN: self.admin_panel,
        }
        for page in self._pages.values():
            self.view_stack.addWidget(page)

        root_layout.addWidget(self.view_stack, stretch=1)

    def _set_view(self, view: View) -> None:
        if view == View.ADMIN and not self.auth.is_admin():
            logger.warning("Blocked admin view for non-admin session")
            view = View.LOGIN if not self.auth.is_authenticated() else View.DASHBOARD

        if self._view == View.QUIZ and view != View.QUIZ:
            self.quiz_panel.stop()

        self._view = view
        self.nav_bar.setVisible(view != View.QUIZ)
        self.view_stack.setCurrentWidget(self._pages[view])

        if view == View.DASHBOARD:
            self.dashboard_panel.refresh()
        elif view == View.ADMIN:
            self.admin_panel.refresh()
        elif view == View.LOGIN:
            self.login_panel.reset_state()
        elif view == View.REGISTER:
            self.register_panel.reset_state()

    def _show_home(self) -> None:
        self._set_view(View.ADMIN if self.auth.is_admin() else View.DASHBOARD)

    # --- Handlers ---

    def _handle_signed_in(self, user: AuthUser) -> None:
        self._set_view(View.ADMIN if user.is_admin else View.DASHBOARD)

    def _handle_logout(self) -> None:
        self.auth.logout()
        self.admin_panel.reset_state()
        self._set_view(View.LOGIN)

    def _handle_auth_changed(self, state: AuthState) -> None:
        self.nav_bar.update_state(state)
        if self._view == View.ADMIN and not self.auth.is_admin():
            self._set_view(View.LOGIN)

    def _handle_start_quiz(self, settings: QuizSettings) -> None:
        self._set_view(View.QUIZ)
        self.quiz_panel.start(settings)

    def _handle_quiz_finished(self, result: ResultSummary) -> None:
        self.result_panel.show_result(result)
        self._set_view(View.RESULT)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Server: {self.quiz_manager.api_base_url}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.quiz_panel.stop()
        super().closeEvent(event)
