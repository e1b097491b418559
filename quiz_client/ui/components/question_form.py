"""Form widgets for authoring a question in the admin panel."""

from __future__ import annotations

from pydantic import ValidationError
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from quiz_client.api.schemas import QuestionDraft
from quiz_client.constants.quiz_constants import (
    DEFAULT_MARKS,
    DEFAULT_QUESTION_TYPE,
    EDITOR_OPTION_SLOTS,
)
from quiz_client.constants.ui_constants import (
    ADMIN_EDIT_TITLE,
    ADMIN_SAVE_BUTTON,
    ADMIN_TYPE_PLACEHOLDER,
    PLACEHOLDER_QUESTION,
)
from quiz_client.core.models import Difficulty, Question
from quiz_client.ui.dialog_helpers import show_warning
from quiz_client.ui.question_renderer import render_question_with_options


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line per problem."""
    lines = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "question"
        lines.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "\n".join(lines)


class QuestionForm(QWidget):
    """Inputs for text, type, difficulty, options, answer and marking."""

    def __init__(self, parent: QWidget | None = None, show_preview: bool = True) -> None:
        super().__init__(parent)
        self._show_preview = show_preview
        self._build_ui()
        self.clear_fields()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.textChanged.connect(self._refresh_preview)
        layout.addWidget(self.question_input)

        form = QFormLayout()
        meta_row = QHBoxLayout()
        self.type_input = QLineEdit(self)
        self.type_input.setPlaceholderText(ADMIN_TYPE_PLACEHOLDER)
        meta_row.addWidget(self.type_input)
        self.difficulty_combo = QComboBox(self)
        for difficulty in Difficulty:
            self.difficulty_combo.addItem(difficulty.value, userData=difficulty)
        meta_row.addWidget(self.difficulty_combo)
        form.addRow("Type / Difficulty", meta_row)

        self.option_inputs: list[QLineEdit] = []
        self.options_form = QFormLayout()
        form.addRow(self.options_form)
        self._set_option_slot_count(EDITOR_OPTION_SLOTS)

        self.correct_combo = QComboBox(self)
        self.correct_combo.currentIndexChanged.connect(lambda _: self._refresh_preview())
        form.addRow("Correct Answer", self.correct_combo)

        marks_row = QHBoxLayout()
        self.marks_spinbox = QSpinBox(self)
        self.marks_spinbox.setRange(1, 100)
        marks_row.addWidget(self.marks_spinbox)
        self.negative_checkbox = QCheckBox("Enable Negative Marks", self)
        self.negative_checkbox.toggled.connect(self._handle_negative_toggle)
        marks_row.addWidget(self.negative_checkbox)
        self.negative_spinbox = QSpinBox(self)
        self.negative_spinbox.setRange(0, 100)
        self.negative_spinbox.setPrefix("-")
        marks_row.addWidget(self.negative_spinbox)
        form.addRow("Marks", marks_row)
        layout.addLayout(form)

        self.preview_view: QWebEngineView | None = None
        if self._show_preview:
            self.preview_view = QWebEngineView(self)
            self.preview_view.setMinimumHeight(140)
            layout.addWidget(self.preview_view)

    def _set_option_slot_count(self, count: int) -> None:
        while len(self.option_inputs) < count:
            option_input = QLineEdit(self)
            option_input.textChanged.connect(self._refresh_answer_choices)
            self.options_form.addRow(f"Option {len(self.option_inputs) + 1}", option_input)
            self.option_inputs.append(option_input)
        while len(self.option_inputs) > count:
            self.option_inputs.pop()
            self.options_form.removeRow(self.options_form.rowCount() - 1)

    def _handle_negative_toggle(self, checked: bool) -> None:
        self.negative_spinbox.setVisible(checked)

    def _refresh_answer_choices(self) -> None:
        current = self.correct_combo.currentData()
        self.correct_combo.blockSignals(True)
        self.correct_combo.clear()
        self.correct_combo.addItem("Select...", userData=None)
        for option in self._option_texts():
            self.correct_combo.addItem(option, userData=option)
        index = self.correct_combo.findData(current) if current else 0
        self.correct_combo.setCurrentIndex(max(0, index))
        self.correct_combo.blockSignals(False)
        self._refresh_preview()

    def _option_texts(self) -> list[str]:
        return [field.text().strip() for field in self.option_inputs if field.text().strip()]

    def _refresh_preview(self) -> None:
        if self.preview_view is None:
            return
        html = render_question_with_options(
            self.question_input.toPlainText(),
            self._option_texts(),
            correct_answer=self.correct_combo.currentData(),
        )
        self.preview_view.setHtml(html)

    def build_draft(self) -> QuestionDraft:
        """Validate the inputs; raises ``ValueError`` with a readable message."""
        correct = self.correct_combo.currentData()
        if correct is None:
            raise ValueError("Select the correct answer before saving.")
        try:
            return QuestionDraft(
                question_text=self.question_input.toPlainText(),
                options=[field.text() for field in self.option_inputs],
                correct_answer=correct,
                question_type=self.type_input.text(),
                difficulty=self.difficulty_combo.currentData(),
                marks=self.marks_spinbox.value(),
                has_negative_marking=self.negative_checkbox.isChecked(),
                negative_marks=self.negative_spinbox.value(),
            )
        except ValidationError as exc:
            raise ValueError(describe_validation_error(exc)) from exc

    def populate_fields(self, question: Question) -> None:
        self.question_input.setPlainText(question.question_text)
        self.type_input.setText(question.question_type)
        self.difficulty_combo.setCurrentIndex(self.difficulty_combo.findData(question.difficulty))
        options = question.editor_options()
        self._set_option_slot_count(len(options))
        for field, text in zip(self.option_inputs, options):
            field.setText(text)
        self.correct_combo.setCurrentIndex(max(0, self.correct_combo.findData(question.correct_answer)))
        self.marks_spinbox.setValue(question.marks)
        self.negative_checkbox.setChecked(question.has_negative_marking)
        self.negative_spinbox.setValue(question.negative_marks)
        self._handle_negative_toggle(question.has_negative_marking)

    def clear_fields(self) -> None:
        self.question_input.clear()
        self.type_input.setText(DEFAULT_QUESTION_TYPE)
        self.difficulty_combo.setCurrentIndex(self.difficulty_combo.findData(Difficulty.MEDIUM))
        self._set_option_slot_count(EDITOR_OPTION_SLOTS)
        for field in self.option_inputs:
            field.clear()
        self._refresh_answer_choices()
        self.marks_spinbox.setValue(DEFAULT_MARKS)
        self.negative_checkbox.setChecked(False)
        self.negative_spinbox.setValue(0)
        self._handle_negative_toggle(False)


class QuestionEditorDialog(QDialog):
    """Modal dialog for editing an existing question."""

    def __init__(self, question: Question, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(ADMIN_EDIT_TITLE)
        self.setModal(True)
        self.setMinimumWidth(560)
        self._draft: QuestionDraft | None = None

        layout = QVBoxLayout()
        self.setLayout(layout)

        self.form = QuestionForm(self, show_preview=False)
        self.form.populate_fields(question)
        layout.addWidget(self.form)

        button_row = QHBoxLayout()
        button_row.addStretch()
        close_button = QPushButton("Close", self)
        close_button.clicked.connect(self.reject)
        button_row.addWidget(close_button)
        save_button = QPushButton(ADMIN_SAVE_BUTTON, self)
        save_button.setDefault(True)
        save_button.clicked.connect(self._handle_save)
        button_row.addWidget(save_button)
        layout.addLayout(button_row)

    def _handle_save(self) -> None:
        try:
            self._draft = self.form.build_draft()
        except ValueError as exc:
            show_warning(self, "Invalid question", str(exc))
            return
        self.accept()

    def get_draft(self) -> QuestionDraft | None:
        return self._draft
