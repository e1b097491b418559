"""Tracks which questions have been viewed for the navigator sidebar."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from quiz_client.core.models import Question


class DotState(str, Enum):
    """Progress indicator shown for a question in the navigator."""

    ANSWERED = "answered"
    VIEWED = "viewed"
    NOT_VIEWED = "not_viewed"


@dataclass(frozen=True, slots=True)
class TrackerDot:
    """Immutable snapshot of one navigator entry."""

    index: int
    is_current: bool
    is_answered: bool
    is_viewed: bool

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def state(self) -> DotState:
        if self.is_answered:
            return DotState.ANSWERED
        if self.is_viewed:
            return DotState.VIEWED
        return DotState.NOT_VIEWED


class NavigationTracker:
    """Remembers visited question indices; once viewed, always viewed."""

    def __init__(self, question_count: int) -> None:
        self._question_count = question_count
        self._viewed: set[int] = set()

    def mark_viewed(self, index: int) -> None:
        if 0 <= index < self._question_count:
            self._viewed.add(index)

    def is_viewed(self, index: int) -> bool:
        return index in self._viewed

    def viewed_indices(self) -> set[int]:
        return set(self._viewed)

    def dots(
        self,
        questions: Sequence[Question],
        current_index: int,
        answers: Mapping[str, str],
    ) -> list[TrackerDot]:
        return [
            TrackerDot(
                index=index,
                is_current=index == current_index,
                is_answered=bool(answers.get(question.id)),
                is_viewed=index in self._viewed,
            )
            for index, question in enumerate(questions)
        ]
