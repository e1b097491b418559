"""Component for creating a new account."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from quiz_client.api.client import ApiError
from quiz_client.constants.ui_constants import (
    GENDER_CHOICES,
    REGISTER_BUTTON,
    REGISTER_REDIRECT,
    REGISTER_SUBTITLE,
    REGISTER_TITLE,
)
from quiz_client.core.auth_session import AuthError, AuthSession, RegistrationForm
from quiz_client.core.models import AuthUser
from quiz_client.styling.styles import Styles


class RegisterPanel(QWidget):
    """Registration form; a valid company key registers an administrator."""

    def __init__(
        self,
        auth: AuthSession,
        on_registered: Callable[[AuthUser], None],
        on_show_login: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.auth = auth
        self.on_registered = on_registered
        self.on_show_login = on_show_login
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
        self.setLayout(layout)

        title = QLabel(REGISTER_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        subtitle = QLabel(REGISTER_SUBTITLE, self)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(Styles.get_subtitle_style())
        layout.addWidget(subtitle)

        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        form = QFormLayout()
        self.username_input = QLineEdit(self)
        form.addRow("Username", self.username_input)
        self.name_input = QLineEdit(self)
        form.addRow("Full Name", self.name_input)
        self.email_input = QLineEdit(self)
        form.addRow("Email Address", self.email_input)

        self.age_input = QSpinBox(self)
        self.age_input.setRange(1, 120)
        self.age_input.setValue(18)
        form.addRow("Age", self.age_input)

        self.gender_input = QComboBox(self)
        for choice in GENDER_CHOICES:
            self.gender_input.addItem(choice.capitalize(), userData=choice)
        form.addRow("Gender", self.gender_input)

        self.password_input = QLineEdit(self)
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.setPlaceholderText("Password (min. 6 characters)")
        form.addRow("Password", self.password_input)

        self.confirm_input = QLineEdit(self)
        self.confirm_input.setEchoMode(QLineEdit.Password)
        form.addRow("Confirm Password", self.confirm_input)

        self.company_key_input = QLineEdit(self)
        self.company_key_input.setPlaceholderText("Company Key (Optional, for Admins)")
        form.addRow("Company Key", self.company_key_input)
        layout.addLayout(form)

        self.submit_button = QPushButton(REGISTER_BUTTON, self)
        self.submit_button.setStyleSheet(Styles.get_primary_button_style())
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button)

        self.login_link = QPushButton(REGISTER_REDIRECT, self)
        self.login_link.setFlat(True)
        self.login_link.clicked.connect(self.on_show_login)
        layout.addWidget(self.login_link)

    def _handle_submit(self) -> None:
        self._set_error(None)
        required = (self.username_input, self.name_input, self.email_input)
        if any(not field.text().strip() for field in required):
            self._set_error("Username, full name and email are required.")
            return

        form = RegistrationForm(
            username=self.username_input.text().strip(),
            name=self.name_input.text().strip(),
            email=self.email_input.text().strip(),
            age=self.age_input.value(),
            gender=self.gender_input.currentData(),
            password=self.password_input.text(),
            password_confirmation=self.confirm_input.text(),
            company_key=self.company_key_input.text().strip(),
        )
        try:
            user = self.auth.register(form)
        except (AuthError, ApiError) as exc:
            self._set_error(str(exc))
            return

        self.reset_state()
        self.on_registered(user)

    def _set_error(self, message: str | None) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def reset_state(self) -> None:
        for field in (
            self.username_input,
            self.name_input,
            self.email_input,
            self.password_input,
            self.confirm_input,
            self.company_key_input,
        ):
            field.clear()
        self.age_input.setValue(18)
        self.gender_input.setCurrentIndex(0)
        self._set_error(None)
