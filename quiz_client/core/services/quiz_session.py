"""Service holding the state of one user's quiz attempt."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable

from quiz_client.constants.quiz_constants import MIXED_QUIZ_TYPE, NO_QUESTIONS_FOUND_MESSAGE
from quiz_client.core.models import Question, QuizSettings, ResultSummary
from quiz_client.core.services.countdown_timer import CountdownTimer, Scheduler
from quiz_client.core.services.navigation_tracker import NavigationTracker, TrackerDot
from quiz_client.core.services.result_summary import summarize

logger = logging.getLogger(__name__)


class NoQuestionsFoundError(Exception):
    """Raised when no question matches the chosen type and difficulty."""

    def __init__(self, message: str = NO_QUESTIONS_FOUND_MESSAGE) -> None:
        super().__init__(message)


def filter_questions(questions: Iterable[Question], settings: QuizSettings) -> list[Question]:
    """Select the questions eligible for ``settings``, keeping their order."""
    if settings.quiz_type == MIXED_QUIZ_TYPE:
        return [q for q in questions if q.difficulty == settings.difficulty]
    return [
        q for q in questions
        if q.question_type == settings.quiz_type and q.difficulty == settings.difficulty
    ]


def time_limit_for(question_count: int, settings: QuizSettings) -> int:
    return question_count * settings.difficulty.seconds_per_question


class QuizSession:
    """Manages answers, navigation, the countdown and final scoring."""

    def __init__(self, questions: Iterable[Question], settings: QuizSettings) -> None:
        selected = filter_questions(questions, settings)
        if not selected:
            raise NoQuestionsFoundError()

        self._settings = settings
        self._questions: tuple[Question, ...] = tuple(selected)
        self._current_index: int = 0
        self._answers: dict[str, str] = {}
        self._tracker = NavigationTracker(len(self._questions))
        self._time_limit_seconds = time_limit_for(len(self._questions), settings)
        self._timer: CountdownTimer | None = None
        self._result: ResultSummary | None = None
        self._finish_listeners: list[Callable[[ResultSummary], None]] = []

        logger.info(
            "Quiz session created: type=%s difficulty=%s questions=%d limit=%ss",
            settings.quiz_type,
            settings.difficulty.value,
            len(self._questions),
            self._time_limit_seconds,
        )

    # --- Read access ---

    def get_settings(self) -> QuizSettings:
        return self._settings

    def get_questions(self) -> list[Question]:
        return list(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_current_index(self) -> int:
        return self._current_index

    def get_current_question(self) -> Question:
        return self._questions[self._current_index]

    def get_answer(self, question_id: str) -> str | None:
        return self._answers.get(question_id)

    def get_answers(self) -> dict[str, str]:
        return dict(self._answers)

    def get_time_limit_seconds(self) -> int:
        return self._time_limit_seconds

    def get_remaining_seconds(self) -> int:
        if self._timer is None:
            return self._time_limit_seconds
        return self._timer.remaining_seconds

    def get_tracker_dots(self) -> list[TrackerDot]:
        return self._tracker.dots(self._questions, self._current_index, self._answers)

    def is_first_question(self) -> bool:
        return self._current_index == 0

    def is_last_question(self) -> bool:
        return self._current_index == len(self._questions) - 1

    def is_finished(self) -> bool:
        return self._result is not None

    def needs_confirmation(self) -> bool:
        """Whether a manual submit should be confirmed (time is still left)."""
        return not self.is_finished() and self.get_remaining_seconds() > 0

    # --- Mutations ---

    def select_answer(self, question_id: str, option: str) -> None:
        if self.is_finished():
            logger.debug("Ignoring answer for %s after submission", question_id)
            return
        self._answers[question_id] = option

    def go_to(self, index: int) -> bool:
        """Move to ``index``; out-of-range targets are ignored."""
        if self.is_finished():
            return False
        if not 0 <= index < len(self._questions):
            return False
        self._tracker.mark_viewed(self._current_index)
        self._current_index = index
        return True

    def next(self) -> bool:
        return self.go_to(self._current_index + 1)

    def previous(self) -> bool:
        return self.go_to(self._current_index - 1)

    def submit(self) -> ResultSummary:
        """Score the session once; later calls return the stored result."""
        if self._result is not None:
            return self._result

        self._result = summarize(self._questions, self._answers)
        self.stop_timer()
        logger.info(
            "Quiz submitted: score=%d correct=%d incorrect=%d unattempted=%d",
            self._result.score,
            self._result.correct,
            self._result.incorrect,
            self._result.unattempted,
        )
        for listener in list(self._finish_listeners):
            listener(self._result)
        return self._result

    def add_finish_listener(self, listener: Callable[[ResultSummary], None]) -> None:
        self._finish_listeners.append(listener)

    # --- Countdown ---

    def start_timer(self, scheduler: Scheduler, on_tick: Callable[[int], None] | None = None) -> None:
        if self.is_finished():
            raise RuntimeError("Cannot start the countdown of a submitted quiz.")
        if self._timer is not None:
            raise RuntimeError("Countdown is already running for this session.")
        self._timer = CountdownTimer(
            self._time_limit_seconds,
            on_expire=self._handle_time_up,
            on_tick=on_tick,
        )
        self._timer.start(scheduler)

    def stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()

    def _handle_time_up(self) -> None:
        logger.info("Time limit reached; submitting automatically")
        self.submit()
