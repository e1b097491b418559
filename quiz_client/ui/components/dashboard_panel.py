"""Component for picking a quiz category and difficulty."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from quiz_client.api.client import ApiError
from quiz_client.constants.quiz_constants import MIXED_QUIZ_TYPE
from quiz_client.constants.ui_constants import (
    DASHBOARD_COUNT_TEMPLATE,
    DASHBOARD_DIFFICULTY_PROMPT,
    DASHBOARD_LOADING,
    DASHBOARD_MIXED_TITLE,
    DASHBOARD_TITLE,
    LOGIN_REQUIRED_MESSAGE,
    LOGIN_REQUIRED_TITLE,
)
from quiz_client.core.models import Difficulty, QuizSettings
from quiz_client.core.quiz_manager import QuizManager
from quiz_client.core.services.question_bank import CategorySummary
from quiz_client.ui.dialog_helpers import ask_login_required
from quiz_client.styling.styles import Styles

_CARD_COLUMNS = 3


class DashboardPanel(QWidget):
    """Grid of quiz cards: one for mixed topics and one per question type."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_start_quiz: Callable[[QuizSettings], None],
        on_login_requested: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_start_quiz = on_start_quiz
        self.on_login_requested = on_login_requested
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(DASHBOARD_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.status_label = QLabel(DASHBOARD_LOADING, self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        layout.addWidget(self.scroll_area, stretch=1)

        self.card_container = QWidget()
        self.card_grid = QGridLayout()
        self.card_container.setLayout(self.card_grid)
        self.scroll_area.setWidget(self.card_container)

    def refresh(self) -> None:
        """Reload the question bank and rebuild the cards."""
        self.status_label.setText(DASHBOARD_LOADING)
        self.status_label.setStyleSheet("")
        self.status_label.setVisible(True)
        self._clear_cards()
        try:
            self.quiz_manager.refresh_question_bank()
        except ApiError as exc:
            self.status_label.setText(str(exc))
            self.status_label.setStyleSheet(Styles.get_error_label_style())
            return

        self.status_label.setVisible(False)
        bank = self.quiz_manager.bank
        summaries = [bank.mixed_summary(MIXED_QUIZ_TYPE), *bank.category_summaries()]
        for position, summary in enumerate(summaries):
            title = DASHBOARD_MIXED_TITLE if position == 0 else summary.name
            card = self._build_card(title, summary)
            self.card_grid.addWidget(card, position // _CARD_COLUMNS, position % _CARD_COLUMNS)

    def _clear_cards(self) -> None:
        while self.card_grid.count():
            item = self.card_grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    def _build_card(self, title: str, summary: CategorySummary) -> QGroupBox:
        card = QGroupBox(title, self.card_container)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        card_layout.addWidget(QLabel(DASHBOARD_COUNT_TEMPLATE.format(count=summary.question_count), card))
        card_layout.addWidget(QLabel(DASHBOARD_DIFFICULTY_PROMPT, card))

        button_row = QHBoxLayout()
        for difficulty in Difficulty:
            button = QPushButton(difficulty.value, card)
            button.setEnabled(summary.has_difficulty(difficulty))
            if button.isEnabled():
                button.setStyleSheet(Styles.get_difficulty_badge_style(difficulty))
            button.clicked.connect(
                lambda _=False, quiz_type=summary.name, level=difficulty: self._handle_attempt(quiz_type, level)
            )
            button_row.addWidget(button)
        card_layout.addLayout(button_row)
        return card

    def _handle_attempt(self, quiz_type: str, difficulty: Difficulty) -> None:
        if not self.quiz_manager.auth.is_authenticated():
            if ask_login_required(self, LOGIN_REQUIRED_TITLE, LOGIN_REQUIRED_MESSAGE):
                self.quiz_manager.auth.logout()
                self.on_login_requested()
            return
        self.on_start_quiz(QuizSettings(quiz_type=quiz_type, difficulty=difficulty))
