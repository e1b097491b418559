"""Unit tests for the wire-format models."""

import unittest
from datetime import datetime, timezone

from pydantic import ValidationError

from quiz_client.api.schemas import AuthResponse, QuestionDraft, QuestionRecord
from quiz_client.core.models import Difficulty
from tests.fixtures import make_question, question_record


class TestQuestionRecord(unittest.TestCase):

    def test_parses_wire_fields(self):
        question = QuestionRecord.model_validate(question_record("abc")).to_question()
        self.assertEqual(question.id, "abc")
        self.assertEqual(question.question_text, "What is 2 + 2?")
        self.assertEqual(question.correct_answer, "4")
        self.assertEqual(question.difficulty, Difficulty.LOW)
        self.assertEqual(question.marks, 2)
        self.assertTrue(question.has_negative_marking)
        self.assertEqual(question.negative_marks, 1)
        self.assertEqual(question.created_at, datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc))

    def test_missing_scoring_fields_use_defaults(self):
        raw = question_record()
        for key in ("difficulty", "marks", "hasNegativeMarking", "negativeMarks", "createdAt"):
            del raw[key]
        question = QuestionRecord.model_validate(raw).to_question()
        self.assertEqual(question.difficulty, Difficulty.MEDIUM)
        self.assertEqual(question.marks, 1)
        self.assertFalse(question.has_negative_marking)
        self.assertEqual(question.negative_marks, 0)
        self.assertIsNone(question.created_at)

    def test_null_marks_fall_back(self):
        question = QuestionRecord.model_validate(question_record(marks=None, negativeMarks=None)).to_question()
        self.assertEqual(question.marks, 1)
        self.assertEqual(question.negative_marks, 0)

    def test_unknown_difficulty_rejected(self):
        with self.assertRaises(ValidationError):
            QuestionRecord.model_validate(question_record(difficulty="Extreme"))


class TestQuestionDraft(unittest.TestCase):

    def _draft(self, **overrides):
        values = {
            "question_text": "  Pick one  ",
            "options": ["A", " ", "B", ""],
            "correct_answer": "B",
        }
        values.update(overrides)
        return QuestionDraft(**values)

    def test_defaults(self):
        draft = self._draft()
        self.assertEqual(draft.question_type, "Aptitude")
        self.assertEqual(draft.difficulty, Difficulty.MEDIUM)
        self.assertEqual(draft.marks, 1)
        self.assertFalse(draft.has_negative_marking)

    def test_blank_options_dropped_and_text_trimmed(self):
        draft = self._draft()
        self.assertEqual(draft.options, ["A", "B"])
        self.assertEqual(draft.question_text, "Pick one")

    def test_negative_marks_cleared_without_flag(self):
        draft = self._draft(negative_marks=3)
        self.assertEqual(draft.negative_marks, 0)

    def test_negative_marks_kept_with_flag(self):
        draft = self._draft(has_negative_marking=True, negative_marks=3)
        self.assertEqual(draft.negative_marks, 3)

    def test_correct_answer_must_be_an_option(self):
        with self.assertRaises(ValidationError):
            self._draft(correct_answer="C")

    def test_needs_two_options(self):
        with self.assertRaises(ValidationError):
            self._draft(options=["B", "", ""])

    def test_empty_text_rejected(self):
        with self.assertRaises(ValidationError):
            self._draft(question_text="   ")

    def test_marks_must_be_positive(self):
        with self.assertRaises(ValidationError):
            self._draft(marks=0)

    def test_payload_uses_wire_names(self):
        payload = self._draft(question_type="Coding", difficulty=Difficulty.HIGH).to_payload()
        self.assertEqual(payload, {
            "questionText": "Pick one",
            "options": ["A", "B"],
            "correctAnswer": "B",
            "questionType": "Coding",
            "difficulty": "High",
            "marks": 1,
            "hasNegativeMarking": False,
            "negativeMarks": 0,
        })

    def test_from_question(self):
        question = make_question(marks=2, has_negative_marking=True, negative_marks=1)
        draft = QuestionDraft.from_question(question)
        self.assertEqual(draft.options, question.options)
        self.assertEqual(draft.negative_marks, 1)

    def test_draft_from_edited_five_option_question_keeps_all_options(self):
        question = make_question(options=["a", "b", "c", "d", "e"], correct_answer="e")
        draft = QuestionDraft(
            question_text=question.question_text,
            options=question.editor_options(),
            correct_answer=question.correct_answer,
        )
        self.assertEqual(draft.options, ["a", "b", "c", "d", "e"])
        self.assertEqual(draft.correct_answer, "e")


class TestAuthResponse(unittest.TestCase):

    def test_defaults_to_failure(self):
        response = AuthResponse.model_validate({})
        self.assertFalse(response.success)
        self.assertIsNone(response.token)


if __name__ == "__main__":
    unittest.main()
