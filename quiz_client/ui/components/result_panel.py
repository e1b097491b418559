"""Component showing the final tallies of a submitted quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_client.constants.ui_constants import BACK_TO_DASHBOARD, RESULT_SCORE_CAPTION, RESULT_TITLE
from quiz_client.core.models import ResultSummary
from quiz_client.styling.color_palette import ColorPalette, Theme
from quiz_client.styling.styles import Styles


class ResultPanel(QWidget):
    """Read-only view of a ``ResultSummary``."""

    def __init__(self, on_back_to_dashboard: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back_to_dashboard = on_back_to_dashboard
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        title = QLabel(RESULT_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        caption = QLabel(RESULT_SCORE_CAPTION, self)
        caption.setAlignment(Qt.AlignCenter)
        layout.addWidget(caption)

        self.score_label = QLabel("0", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 32pt; font-weight: bold;")
        layout.addWidget(self.score_label)

        details = QFormLayout()
        self.total_label = QLabel("0", self)
        details.addRow("Total Questions", self.total_label)
        self.correct_label = QLabel("0", self)
        self.correct_label.setStyleSheet(f"color: {ColorPalette.SUCCESS.get(Theme.LIGHT)}; font-weight: bold;")
        details.addRow("Correct Answers", self.correct_label)
        self.incorrect_label = QLabel("0", self)
        self.incorrect_label.setStyleSheet(f"color: {ColorPalette.ERROR.get(Theme.LIGHT)}; font-weight: bold;")
        details.addRow("Incorrect Answers", self.incorrect_label)
        self.unattempted_label = QLabel("0", self)
        details.addRow("Unattempted", self.unattempted_label)
        layout.addLayout(details)

        back_button = QPushButton(BACK_TO_DASHBOARD, self)
        back_button.setStyleSheet(Styles.get_primary_button_style())
        back_button.clicked.connect(self.on_back_to_dashboard)
        layout.addWidget(back_button)

    def show_result(self, result: ResultSummary) -> None:
        self.score_label.setText(str(result.score))
        self.total_label.setText(str(result.total_questions))
        self.correct_label.setText(str(result.correct))
        self.incorrect_label.setText(str(result.incorrect))
        self.unattempted_label.setText(str(result.unattempted))
