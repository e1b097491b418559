"""Scoring of a finished quiz session."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from quiz_client.core.models import Question, ResultSummary


def summarize(questions: Sequence[Question], answers: Mapping[str, str]) -> ResultSummary:
    """Tally ``answers`` (question id -> chosen option) against ``questions``.

    Correct answers add the question's marks, incorrect ones subtract its
    negative marks when negative marking is enabled. The total is not
    clamped and may end up below zero.
    """
    score = 0
    correct = 0
    incorrect = 0
    for question in questions:
        answer = answers.get(question.id)
        if not answer:
            continue
        score += question.score_for(answer)
        if question.is_correct(answer):
            correct += 1
        else:
            incorrect += 1

    total = len(questions)
    return ResultSummary(
        score=score,
        total_questions=total,
        correct=correct,
        incorrect=incorrect,
        unattempted=total - (correct + incorrect),
    )
