"""Service for summarising and organising the full question bank."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from quiz_client.constants.quiz_constants import ALL_TYPES_FILTER
from quiz_client.core.models import Difficulty, Question

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(slots=True)
class CategorySummary:
    """Question count and available difficulties for one quiz type."""

    name: str
    question_count: int = 0
    difficulties: set[Difficulty] = field(default_factory=set)

    def has_difficulty(self, difficulty: Difficulty) -> bool:
        return difficulty in self.difficulties


class QuestionBank:
    """Holds the fetched questions for the dashboard and admin views."""

    def __init__(self) -> None:
        self._questions: list[Question] = []

    def load_questions(self, questions: list[Question]) -> None:
        self._questions = list(questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    # --- Dashboard ---

    def mixed_summary(self, name: str) -> CategorySummary:
        return CategorySummary(
            name=name,
            question_count=len(self._questions),
            difficulties={q.difficulty for q in self._questions},
        )

    def category_summaries(self) -> list[CategorySummary]:
        """One summary per question type, in the order types first appear."""
        summaries: dict[str, CategorySummary] = {}
        for question in self._questions:
            summary = summaries.get(question.question_type)
            if summary is None:
                summary = CategorySummary(name=question.question_type)
                summaries[question.question_type] = summary
            summary.question_count += 1
            summary.difficulties.add(question.difficulty)
        return list(summaries.values())

    # --- Admin ---

    def question_types(self) -> list[str]:
        types = dict.fromkeys(q.question_type for q in self.sorted_questions())
        return [ALL_TYPES_FILTER, *types]

    def sorted_questions(self) -> list[Question]:
        """Questions ordered by type, newest first within a type."""
        by_newest = sorted(self._questions, key=_created_key, reverse=True)
        return sorted(by_newest, key=lambda q: q.question_type)

    def grouped(self, filter_type: str = ALL_TYPES_FILTER) -> dict[str, list[Question]]:
        groups: dict[str, list[Question]] = {}
        for question in self.sorted_questions():
            if filter_type != ALL_TYPES_FILTER and question.question_type != filter_type:
                continue
            groups.setdefault(question.question_type, []).append(question)
        return groups


def _created_key(question: Question) -> datetime:
    created = question.created_at
    if created is None:
        return _OLDEST
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created
