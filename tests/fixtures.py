"""Shared sample data and fakes for the quiz client tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import jwt

from quiz_client.core.models import Difficulty, Question


def make_question(
    question_id: str = "q1",
    question_type: str = "Aptitude",
    difficulty: Difficulty = Difficulty.MEDIUM,
    correct_answer: str = "B",
    options: list[str] | None = None,
    marks: int = 1,
    has_negative_marking: bool = False,
    negative_marks: int = 0,
    created_at: datetime | None = None,
) -> Question:
    return Question(
        id=question_id,
        question_text=f"Question {question_id}?",
        options=options or ["A", "B", "C", "D"],
        correct_answer=correct_answer,
        question_type=question_type,
        difficulty=difficulty,
        marks=marks,
        has_negative_marking=has_negative_marking,
        negative_marks=negative_marks,
        created_at=created_at,
    )


def sample_bank() -> list[Question]:
    """Mixed bank covering two types and all three difficulties."""
    return [
        make_question("a1", "Aptitude", Difficulty.MEDIUM, created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
        make_question("c1", "Coding", Difficulty.LOW, created_at=datetime(2024, 3, 1, tzinfo=timezone.utc)),
        make_question("a2", "Aptitude", Difficulty.MEDIUM, created_at=datetime(2024, 2, 1, tzinfo=timezone.utc)),
        make_question("a3", "Aptitude", Difficulty.HIGH),
        make_question("c2", "Coding", Difficulty.MEDIUM, created_at=datetime(2024, 4, 1, tzinfo=timezone.utc)),
    ]


def question_record(question_id: str = "q1", **overrides) -> dict:
    """A question as the quiz service returns it."""
    record = {
        "_id": question_id,
        "questionText": "What is 2 + 2?",
        "options": ["3", "4", "5"],
        "correctAnswer": "4",
        "questionType": "Aptitude",
        "difficulty": "Low",
        "marks": 2,
        "hasNegativeMarking": True,
        "negativeMarks": 1,
        "createdAt": "2024-05-01T10:00:00.000Z",
        "__v": 0,
    }
    record.update(overrides)
    return record


def make_token(username: str = "alice", role: str = "user", expires_at: float = 4_102_444_800) -> str:
    """Token carrying the claims the quiz service issues."""
    return jwt.encode(
        {"user": {"id": "u1", "username": username, "role": role}, "exp": int(expires_at)},
        "quiz-client-test-signing-secret-0123456789",
        algorithm="HS256",
    )


class ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler fake; tests advance time by calling ``advance``."""

    def __init__(self) -> None:
        self.callbacks: list[tuple[ManualHandle, Callable[[], None]]] = []
        self.intervals: list[float] = []

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle()
        self.callbacks.append((handle, callback))
        self.intervals.append(interval_seconds)
        return handle

    def advance(self, seconds: int) -> None:
        for _ in range(seconds):
            for handle, callback in list(self.callbacks):
                if not handle.cancelled:
                    callback()

    @property
    def active_count(self) -> int:
        return sum(1 for handle, _ in self.callbacks if not handle.cancelled)
