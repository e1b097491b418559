"""Top navigation bar showing the signed-in user and account actions."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from quiz_client.constants.ui_constants import (
    NAV_ABOUT_BUTTON,
    NAV_ADMIN_BUTTON,
    NAV_BRAND,
    NAV_LOGIN_BUTTON,
    NAV_LOGOUT_BUTTON,
    NAV_REGISTER_BUTTON,
    NAV_WELCOME_TEMPLATE,
)
from quiz_client.core.models import AuthState
from quiz_client.styling.styles import Styles


class NavBar(QWidget):
    """Brand link, welcome text and login/logout controls."""

    def __init__(
        self,
        on_home: Callable[[], None],
        on_admin: Callable[[], None],
        on_login: Callable[[], None],
        on_register: Callable[[], None],
        on_logout: Callable[[], None],
        on_about: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._build_ui(on_home, on_admin, on_login, on_register, on_logout, on_about)
        self.update_state(AuthState())

    def _build_ui(self, on_home, on_admin, on_login, on_register, on_logout, on_about) -> None:
        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.brand_button = QPushButton(NAV_BRAND, self)
        self.brand_button.setFlat(True)
        self.brand_button.setStyleSheet(Styles.get_large_label_style())
        self.brand_button.clicked.connect(on_home)
        layout.addWidget(self.brand_button)

        layout.addStretch()

        self.welcome_label = QLabel("", self)
        layout.addWidget(self.welcome_label)

        self.admin_button = QPushButton(NAV_ADMIN_BUTTON, self)
        self.admin_button.clicked.connect(on_admin)
        layout.addWidget(self.admin_button)

        self.login_button = QPushButton(NAV_LOGIN_BUTTON, self)
        self.login_button.clicked.connect(on_login)
        layout.addWidget(self.login_button)

        self.register_button = QPushButton(NAV_REGISTER_BUTTON, self)
        self.register_button.setStyleSheet(Styles.get_primary_button_style())
        self.register_button.clicked.connect(on_register)
        layout.addWidget(self.register_button)

        self.logout_button = QPushButton(NAV_LOGOUT_BUTTON, self)
        self.logout_button.setStyleSheet(Styles.get_primary_button_style())
        self.logout_button.clicked.connect(on_logout)
        layout.addWidget(self.logout_button)

        self.about_button = QPushButton(NAV_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(on_about)
        layout.addWidget(self.about_button)

    def update_state(self, state: AuthState) -> None:
        signed_in = state.is_authenticated and state.user is not None
        username = state.user.username if state.user and state.user.username else "User"
        self.welcome_label.setText(NAV_WELCOME_TEMPLATE.format(username=username))
        self.welcome_label.setVisible(signed_in)
        self.admin_button.setVisible(signed_in and state.user.is_admin)
        self.logout_button.setVisible(signed_in)
        self.login_button.setVisible(not signed_in)
        self.register_button.setVisible(not signed_in)
