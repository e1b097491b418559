"""Domain models for the quiz client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from quiz_client.constants.quiz_constants import (
    ADMIN_ROLE,
    DEFAULT_MARKS,
    DEFAULT_SECONDS_PER_QUESTION,
    EDITOR_OPTION_SLOTS,
    SECONDS_PER_QUESTION,
)


class QuestionValidationError(ValueError):
    """Raised when a question violates its construction rules."""


class Difficulty(str, Enum):
    """Difficulty levels offered by the question bank."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def seconds_per_question(self) -> int:
        return SECONDS_PER_QUESTION.get(self.value, DEFAULT_SECONDS_PER_QUESTION)


@dataclass(slots=True)
class Question:
    """Multiple-choice question whose correct answer is one of its options."""

    id: str
    question_text: str
    options: list[str]
    correct_answer: str
    question_type: str
    difficulty: Difficulty = Difficulty.MEDIUM
    marks: int = DEFAULT_MARKS
    has_negative_marking: bool = False
    negative_marks: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.options:
            raise QuestionValidationError("A question needs at least one option.")
        if self.correct_answer not in self.options:
            raise QuestionValidationError(
                f"Correct answer '{self.correct_answer}' is not one of the options."
            )
        if self.marks < 1:
            raise QuestionValidationError("Marks must be a positive integer.")
        if self.negative_marks < 0:
            raise QuestionValidationError("Negative marks cannot be below zero.")

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct_answer

    def score_for(self, answer: str | None) -> int:
        """Return the score contribution of ``answer`` (``None`` means unattempted)."""
        if not answer:
            return 0
        if self.is_correct(answer):
            return self.marks
        if self.has_negative_marking:
            return -self.negative_marks
        return 0

    def editor_options(self, slots: int = EDITOR_OPTION_SLOTS) -> list[str]:
        """Options padded with blanks to at least ``slots`` entries; never truncated."""
        return list(self.options) + [""] * max(0, slots - len(self.options))


@dataclass(frozen=True, slots=True)
class QuizSettings:
    """Category and difficulty chosen on the dashboard before a session starts."""

    quiz_type: str
    difficulty: Difficulty


@dataclass(frozen=True, slots=True)
class ResultSummary:
    """Final tallies of a submitted session."""

    score: int
    total_questions: int
    correct: int
    incorrect: int
    unattempted: int


@dataclass(frozen=True, slots=True)
class AuthUser:
    """User identity carried inside the auth token."""

    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


@dataclass(frozen=True, slots=True)
class AuthState:
    """Snapshot of the authentication state."""

    is_authenticated: bool = False
    user: AuthUser | None = None
    token: str | None = None
