"""Component for managing the question bank as an administrator."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from quiz_client.api.client import ApiError
from quiz_client.constants.quiz_constants import ALL_TYPES_FILTER
from quiz_client.constants.ui_constants import (
    ADMIN_ADD_BUTTON,
    ADMIN_ADD_TITLE,
    ADMIN_DELETE_BUTTON,
    ADMIN_EDIT_BUTTON,
    ADMIN_FILTER_LABEL,
    ADMIN_LIST_TEMPLATE,
    ADMIN_STALE_LIST_MESSAGE,
    ADMIN_TITLE,
)
from quiz_client.core.models import Question
from quiz_client.core.quiz_manager import QuizManager
from quiz_client.styling.color_palette import ColorPalette, Theme
from quiz_client.styling.styles import Styles
from quiz_client.ui.components.question_form import QuestionEditorDialog, QuestionForm
from quiz_client.ui.dialog_helpers import confirm_delete_question, show_error, show_warning

logger = logging.getLogger(__name__)


class AdminPanel(QWidget):
    """Add form plus a filterable list of existing questions grouped by type."""

    def __init__(self, quiz_manager: QuizManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(ADMIN_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        body_row = QHBoxLayout()

        # Add form
        add_group = QGroupBox(ADMIN_ADD_TITLE, self)
        add_layout = QVBoxLayout()
        add_group.setLayout(add_layout)
        self.add_form = QuestionForm(add_group)
        add_layout.addWidget(self.add_form)
        self.add_button = QPushButton(ADMIN_ADD_BUTTON, add_group)
        self.add_button.setStyleSheet(Styles.get_primary_button_style())
        self.add_button.clicked.connect(self._handle_add)
        add_layout.addWidget(self.add_button)
        body_row.addWidget(add_group, stretch=2)

        # Existing questions
        list_column = QVBoxLayout()
        header_row = QHBoxLayout()
        self.list_title = QLabel(ADMIN_LIST_TEMPLATE.format(count=0), self)
        self.list_title.setStyleSheet("font-weight: bold;")
        header_row.addWidget(self.list_title)
        header_row.addStretch()
        header_row.addWidget(QLabel(ADMIN_FILTER_LABEL, self))
        self.filter_combo = QComboBox(self)
        self.filter_combo.currentTextChanged.connect(lambda _: self._rebuild_list())
        header_row.addWidget(self.filter_combo)
        list_column.addLayout(header_row)

        self.status_label = QLabel("", self)
        self.status_label.setStyleSheet(Styles.get_error_label_style())
        self.status_label.setWordWrap(True)
        self.status_label.setVisible(False)
        list_column.addWidget(self.status_label)

        scroll_area = QScrollArea(self)
        scroll_area.setWidgetResizable(True)
        self.list_container = QWidget()
        self.list_layout = QVBoxLayout()
        self.list_layout.setAlignment(Qt.AlignTop)
        self.list_container.setLayout(self.list_layout)
        scroll_area.setWidget(self.list_container)
        list_column.addWidget(scroll_area, stretch=1)

        body_row.addLayout(list_column, stretch=3)
        layout.addLayout(body_row, stretch=1)

    # --- Data ---

    def refresh(self) -> None:
        """Reload the bank from the server and redraw the list."""
        try:
            self.quiz_manager.refresh_question_bank()
        except ApiError as exc:
            self._show_status(str(exc))
        else:
            self._show_status("")
        self._rebuild_filter()
        self._rebuild_list()

    def _show_status(self, message: str) -> None:
        self.status_label.setText(message)
        self.status_label.setVisible(bool(message))

    def _rebuild_filter(self) -> None:
        current = self.filter_combo.currentText() or ALL_TYPES_FILTER
        self.filter_combo.blockSignals(True)
        self.filter_combo.clear()
        self.filter_combo.addItems(self.quiz_manager.bank.question_types())
        index = self.filter_combo.findText(current)
        self.filter_combo.setCurrentIndex(index if index >= 0 else 0)
        self.filter_combo.blockSignals(False)

    def _rebuild_list(self) -> None:
        while self.list_layout.count():
            item = self.list_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        bank = self.quiz_manager.bank
        self.list_title.setText(ADMIN_LIST_TEMPLATE.format(count=bank.get_question_count()))
        filter_type = self.filter_combo.currentText() or ALL_TYPES_FILTER
        for question_type, questions in bank.grouped(filter_type).items():
            heading = QLabel(question_type, self.list_container)
            heading.setStyleSheet(Styles.get_subtitle_style())
            self.list_layout.addWidget(heading)
            for question in questions:
                self.list_layout.addWidget(self._build_question_card(question))

    def _build_question_card(self, question: Question) -> QGroupBox:
        card = QGroupBox(self.list_container)
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        text_label = QLabel(question.question_text, card)
        text_label.setWordWrap(True)
        text_label.setStyleSheet("font-weight: bold;")
        card_layout.addWidget(text_label)

        badge_row = QHBoxLayout()
        difficulty_badge = QLabel(question.difficulty.value, card)
        difficulty_badge.setStyleSheet(Styles.get_difficulty_badge_style(question.difficulty))
        badge_row.addWidget(difficulty_badge)
        marks_badge = QLabel(f"+{question.marks}", card)
        marks_badge.setStyleSheet(Styles.get_badge_style(ColorPalette.SUCCESS.get(Theme.LIGHT)))
        badge_row.addWidget(marks_badge)
        if question.has_negative_marking:
            negative_badge = QLabel(f"-{question.negative_marks}", card)
            negative_badge.setStyleSheet(Styles.get_badge_style(ColorPalette.ERROR.get(Theme.LIGHT)))
            badge_row.addWidget(negative_badge)
        badge_row.addStretch()
        card_layout.addLayout(badge_row)

        for option in question.options:
            option_label = QLabel(f"• {option}", card)
            if question.is_correct(option):
                option_label.setText(f"✔ {option}")
                option_label.setStyleSheet(f"color: {ColorPalette.SUCCESS.get(Theme.LIGHT)}; font-weight: bold;")
            card_layout.addWidget(option_label)

        action_row = QHBoxLayout()
        action_row.addStretch()
        edit_button = QPushButton(ADMIN_EDIT_BUTTON, card)
        edit_button.clicked.connect(lambda _=False, target=question: self._handle_edit(target))
        action_row.addWidget(edit_button)
        delete_button = QPushButton(ADMIN_DELETE_BUTTON, card)
        delete_button.clicked.connect(lambda _=False, target=question: self._handle_delete(target))
        action_row.addWidget(delete_button)
        card_layout.addLayout(action_row)
        return card

    # --- Handlers ---

    def _handle_add(self) -> None:
        try:
            draft = self.add_form.build_draft()
        except ValueError as exc:
            show_warning(self, "Invalid question", str(exc))
            return
        try:
            refreshed = self.quiz_manager.add_question(draft)
        except ApiError as exc:
            logger.error("Failed to add question: %s", exc)
            show_error(self, "Error", f"Failed to save question: {exc}")
            return
        self.add_form.clear_fields()
        self._after_change(refreshed)

    def _handle_edit(self, question: Question) -> None:
        dialog = QuestionEditorDialog(question, self)
        if dialog.exec() != QDialog.Accepted:
            return
        draft = dialog.get_draft()
        if draft is None:
            return
        try:
            refreshed = self.quiz_manager.update_question(question.id, draft)
        except ApiError as exc:
            logger.error("Failed to update question %s: %s", question.id, exc)
            show_error(self, "Error", f"Failed to update question: {exc}")
            return
        self._after_change(refreshed)

    def _handle_delete(self, question: Question) -> None:
        if not confirm_delete_question(self):
            return
        try:
            refreshed = self.quiz_manager.delete_question(question.id)
        except ApiError as exc:
            logger.error("Failed to delete question %s: %s", question.id, exc)
            show_error(self, "Error", f"Failed to delete question: {exc}")
            return
        self._after_change(refreshed)

    def _after_change(self, refreshed: bool) -> None:
        self._show_status("" if refreshed else ADMIN_STALE_LIST_MESSAGE)
        self._rebuild_filter()
        self._rebuild_list()

    def reset_state(self) -> None:
        self.add_form.clear_fields()
        self._show_status("")
