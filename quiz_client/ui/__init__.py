"""Qt UI components for the quiz client."""

from .dialog_helpers import (
    ask_login_required,
    confirm_delete_question,
    confirm_submit_quiz,
    show_error,
    show_info,
    show_warning,
)
from .main_window import QuizMainWindow
from .question_renderer import render_question, render_question_with_options

__all__ = [
    "QuizMainWindow",
    "ask_login_required",
    "confirm_delete_question",
    "confirm_submit_quiz",
    "show_error",
    "show_info",
    "show_warning",
    "render_question",
    "render_question_with_options",
]
