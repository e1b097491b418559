"""Component for signing in as a user or an administrator."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_client.api.client import ApiError
from quiz_client.constants.quiz_constants import MIN_PASSWORD_LENGTH
from quiz_client.constants.ui_constants import (
    LOGIN_ADMIN_TOGGLE,
    LOGIN_BUTTON,
    LOGIN_REDIRECT,
    LOGIN_SUBTITLE,
    LOGIN_TITLE_ADMIN,
    LOGIN_TITLE_USER,
)
from quiz_client.core.auth_session import AuthError, AuthSession
from quiz_client.core.models import AuthUser
from quiz_client.styling.styles import Styles


class LoginPanel(QWidget):
    """Email/password form with a user/admin toggle."""

    def __init__(
        self,
        auth: AuthSession,
        on_logged_in: Callable[[AuthUser], None],
        on_show_register: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.auth = auth
        self.on_logged_in = on_logged_in
        self.on_show_register = on_show_register
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
        self.setLayout(layout)

        self.title_label = QLabel(LOGIN_TITLE_USER, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        subtitle = QLabel(LOGIN_SUBTITLE, self)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(Styles.get_subtitle_style())
        layout.addWidget(subtitle)

        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        self.admin_toggle = QCheckBox(LOGIN_ADMIN_TOGGLE, self)
        self.admin_toggle.toggled.connect(self._handle_admin_toggle)
        layout.addWidget(self.admin_toggle)

        form = QFormLayout()
        self.email_input = QLineEdit(self)
        self.email_input.setPlaceholderText("Email Address")
        form.addRow("Email", self.email_input)

        self.password_input = QLineEdit(self)
        self.password_input.setPlaceholderText("Password")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.returnPressed.connect(self._handle_submit)
        form.addRow("Password", self.password_input)
        layout.addLayout(form)

        self.submit_button = QPushButton(LOGIN_BUTTON, self)
        self.submit_button.setStyleSheet(Styles.get_primary_button_style())
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button)

        self.register_link = QPushButton(LOGIN_REDIRECT, self)
        self.register_link.setFlat(True)
        self.register_link.clicked.connect(self.on_show_register)
        layout.addWidget(self.register_link)

    def _handle_admin_toggle(self, checked: bool) -> None:
        self.title_label.setText(LOGIN_TITLE_ADMIN if checked else LOGIN_TITLE_USER)

    def _handle_submit(self) -> None:
        self._set_error(None)
        email = self.email_input.text().strip()
        password = self.password_input.text()
        if not email or not password:
            self._set_error("Email and password are required.")
            return
        if len(password) < MIN_PASSWORD_LENGTH:
            self._set_error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
            return

        try:
            user = self.auth.login(email, password, as_admin=self.admin_toggle.isChecked())
        except (AuthError, ApiError) as exc:
            self._set_error(str(exc))
            return

        self.reset_state()
        self.on_logged_in(user)

    def _set_error(self, message: str | None) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def reset_state(self) -> None:
        self.email_input.clear()
        self.password_input.clear()
        self.admin_toggle.setChecked(False)
        self._set_error(None)
