"""Component for taking a timed quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_client.api.client import ApiError
from quiz_client.constants.ui_constants import (
    BACK_TO_DASHBOARD,
    QUIZ_BACK_BUTTON,
    QUIZ_CONFIRM_SUBMIT,
    QUIZ_NEXT_BUTTON,
    QUIZ_PROGRESS_TEMPLATE,
    QUIZ_SUBMIT_BUTTON,
    QUESTION_FONT_SIZE,
    QUIZ_TITLE_TEMPLATE,
    QUIZ_TRACKER_TOGGLE,
    TRACKER_LEGEND,
)
from quiz_client.core.models import QuizSettings, ResultSummary
from quiz_client.core.quiz_manager import QuizManager
from quiz_client.core.services.countdown_timer import format_clock, is_warning
from quiz_client.core.services.navigation_tracker import DotState
from quiz_client.core.services.quiz_session import NoQuestionsFoundError, QuizSession
from quiz_client.ui.dialog_helpers import confirm_submit_quiz
from quiz_client.ui.qt_scheduler import QtScheduler
from quiz_client.ui.question_renderer import render_question
from quiz_client.styling.styles import Styles

_TRACKER_COLUMNS = 5


class QuizPanel(QWidget):
    """Question view with countdown, navigation and a progress navigator."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_finished: Callable[[ResultSummary], None],
        on_back_to_dashboard: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_finished = on_finished
        self.on_back_to_dashboard = on_back_to_dashboard

        self._session: QuizSession | None = None
        self._scheduler = QtScheduler(self)
        self._tracker_buttons: list[QPushButton] = []

        self._build_ui()

    # --- Layout ---

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.page_stack = QStackedWidget(self)
        layout.addWidget(self.page_stack)

        self.page_stack.addWidget(self._build_error_page())
        self.page_stack.addWidget(self._build_quiz_page())

    def _build_error_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page_layout.setAlignment(Qt.AlignCenter)
        page.setLayout(page_layout)

        self.error_label = QLabel("", page)
        self.error_label.setWordWrap(True)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setStyleSheet(Styles.get_error_label_style())
        page_layout.addWidget(self.error_label)

        back_button = QPushButton(BACK_TO_DASHBOARD, page)
        back_button.setStyleSheet(Styles.get_primary_button_style())
        back_button.clicked.connect(self._handle_back_to_dashboard)
        page_layout.addWidget(back_button)
        return page

    def _build_quiz_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        # Header: title, progress, clock
        header_row = QHBoxLayout()
        title_column = QVBoxLayout()
        self.title_label = QLabel("", page)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        title_column.addWidget(self.title_label)
        self.progress_label = QLabel("", page)
        title_column.addWidget(self.progress_label)
        header_row.addLayout(title_column)
        header_row.addStretch()
        self.clock_label = QLabel("00:00", page)
        self.clock_label.setStyleSheet(Styles.get_timer_style(warning=False))
        header_row.addWidget(self.clock_label)
        page_layout.addLayout(header_row)

        badge_row = QHBoxLayout()
        self.difficulty_badge = QLabel("", page)
        badge_row.addWidget(self.difficulty_badge)
        badge_row.addStretch()
        page_layout.addLayout(badge_row)

        body_row = QHBoxLayout()

        # Question card
        content_column = QVBoxLayout()
        self.question_view = QWebEngineView(page)
        self.question_view.setMinimumHeight(160)
        content_column.addWidget(self.question_view, stretch=1)

        self.options_group = QGroupBox(page)
        self.options_group.setStyleSheet(f"font-size: {QUESTION_FONT_SIZE}pt;")
        self.options_layout = QVBoxLayout()
        self.options_group.setLayout(self.options_layout)
        self.option_buttons = QButtonGroup(self)
        self.option_buttons.setExclusive(True)
        self.option_buttons.buttonClicked.connect(self._handle_option_clicked)
        content_column.addWidget(self.options_group)

        nav_row = QHBoxLayout()
        self.back_button = QPushButton(QUIZ_BACK_BUTTON, page)
        self.back_button.clicked.connect(self._handle_previous)
        nav_row.addWidget(self.back_button)
        nav_row.addStretch()
        self.next_button = QPushButton(QUIZ_NEXT_BUTTON, page)
        self.next_button.setStyleSheet(Styles.get_primary_button_style())
        self.next_button.clicked.connect(self._handle_next)
        nav_row.addWidget(self.next_button)
        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, page)
        self.submit_button.clicked.connect(self._handle_submit)
        nav_row.addWidget(self.submit_button)
        content_column.addLayout(nav_row)

        body_row.addLayout(content_column, stretch=3)

        # Navigator sidebar
        sidebar_column = QVBoxLayout()
        self.sidebar_toggle = QPushButton("⟩", page)
        self.sidebar_toggle.setToolTip(QUIZ_TRACKER_TOGGLE)
        self.sidebar_toggle.clicked.connect(self._toggle_sidebar)
        sidebar_column.addWidget(self.sidebar_toggle, alignment=Qt.AlignRight)

        self.tracker_group = QGroupBox(page)
        tracker_layout = QVBoxLayout()
        self.tracker_group.setLayout(tracker_layout)
        self.tracker_grid = QGridLayout()
        tracker_layout.addLayout(self.tracker_grid)
        for state_name, caption in TRACKER_LEGEND:
            legend_row = QHBoxLayout()
            swatch = QLabel("", self.tracker_group)
            swatch.setStyleSheet(Styles.get_tracker_dot_style(DotState(state_name), is_current=False))
            legend_row.addWidget(swatch)
            legend_row.addWidget(QLabel(caption, self.tracker_group))
            legend_row.addStretch()
            tracker_layout.addLayout(legend_row)
        tracker_layout.addStretch()
        sidebar_column.addWidget(self.tracker_group, stretch=1)

        body_row.addLayout(sidebar_column, stretch=1)
        page_layout.addLayout(body_row, stretch=1)
        return page

    # --- Session lifecycle ---

    def start(self, settings: QuizSettings) -> bool:
        """Fetch questions and begin a timed session; shows the error view on failure."""
        self.stop()
        try:
            session = self.quiz_manager.start_quiz(settings)
        except (ApiError, NoQuestionsFoundError) as exc:
            self._show_error(str(exc))
            return False

        self._session = session
        session.add_finish_listener(self._handle_finished)
        self.title_label.setText(QUIZ_TITLE_TEMPLATE.format(quiz_type=session.get_settings().quiz_type))
        self._rebuild_tracker(session.get_question_count())
        self._update_clock(session.get_remaining_seconds())
        self.page_stack.setCurrentIndex(1)
        self._display_current_question()
        session.start_timer(self._scheduler, on_tick=self._update_clock)
        return True

    def stop(self) -> None:
        """Tear down the running session so no tick fires after leaving the view."""
        if self._session is not None:
            self._session.stop_timer()
        self._session = None

    def _show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.page_stack.setCurrentIndex(0)

    def _handle_back_to_dashboard(self) -> None:
        self.stop()
        self.on_back_to_dashboard()

    def _handle_finished(self, result: ResultSummary) -> None:
        self.stop()
        self.on_finished(result)

    # --- Rendering ---

    def _display_current_question(self) -> None:
        session = self._session
        if session is None:
            return
        question = session.get_current_question()
        index = session.get_current_index()

        self.progress_label.setText(
            QUIZ_PROGRESS_TEMPLATE.format(number=index + 1, total=session.get_question_count())
        )
        self.difficulty_badge.setText(question.difficulty.value)
        self.difficulty_badge.setStyleSheet(Styles.get_difficulty_badge_style(question.difficulty))
        self.question_view.setHtml(
            render_question(index + 1, question.question_text, font_size=QUESTION_FONT_SIZE)
        )
        self._rebuild_options()

        self.back_button.setEnabled(not session.is_first_question())
        self.next_button.setVisible(not session.is_last_question())
        self.submit_button.setVisible(session.is_last_question())
        self._refresh_tracker()

    def _rebuild_options(self) -> None:
        for button in self.option_buttons.buttons():
            self.option_buttons.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()

        session = self._session
        question = session.get_current_question()
        chosen = session.get_answer(question.id)
        for option in question.options:
            radio = QRadioButton(option, self.options_group)
            radio.setProperty("option", option)
            radio.setChecked(option == chosen)
            self.option_buttons.addButton(radio)
            self.options_layout.addWidget(radio)

    def _rebuild_tracker(self, question_count: int) -> None:
        while self.tracker_grid.count():
            item = self.tracker_grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._tracker_buttons = []
        for index in range(question_count):
            button = QPushButton(str(index + 1), self.tracker_group)
            button.clicked.connect(lambda _=False, target=index: self._handle_jump(target))
            self.tracker_grid.addWidget(button, index // _TRACKER_COLUMNS, index % _TRACKER_COLUMNS)
            self._tracker_buttons.append(button)

    def _refresh_tracker(self) -> None:
        if self._session is None:
            return
        for dot, button in zip(self._session.get_tracker_dots(), self._tracker_buttons):
            button.setStyleSheet(Styles.get_tracker_dot_style(dot.state, dot.is_current))

    def _update_clock(self, remaining_seconds: int) -> None:
        self.clock_label.setText(format_clock(remaining_seconds))
        self.clock_label.setStyleSheet(Styles.get_timer_style(warning=is_warning(remaining_seconds)))

    def _toggle_sidebar(self) -> None:
        collapsed = self.tracker_group.isVisible()
        self.tracker_group.setVisible(not collapsed)
        self.sidebar_toggle.setText("⟨" if collapsed else "⟩")

    # --- Handlers ---

    def _handle_option_clicked(self, button: QRadioButton) -> None:
        if self._session is None:
            return
        question = self._session.get_current_question()
        self._session.select_answer(question.id, button.property("option"))
        self._refresh_tracker()

    def _handle_jump(self, index: int) -> None:
        if self._session is not None and self._session.go_to(index):
            self._display_current_question()

    def _handle_next(self) -> None:
        if self._session is not None and self._session.next():
            self._display_current_question()

    def _handle_previous(self) -> None:
        if self._session is not None and self._session.previous():
            self._display_current_question()

    def _handle_submit(self) -> None:
        session = self._session
        if session is None:
            return
        if session.needs_confirmation() and not confirm_submit_quiz(self, QUIZ_CONFIRM_SUBMIT):
            return
        session.submit()

