"""Unit tests for the quiz domain models."""

import unittest

from quiz_client.core.models import AuthUser, Difficulty, QuestionValidationError
from tests.fixtures import make_question


class TestQuestion(unittest.TestCase):

    def test_correct_answer_must_be_an_option(self):
        with self.assertRaises(QuestionValidationError):
            make_question(correct_answer="Z")

    def test_options_cannot_be_empty(self):
        with self.assertRaises(QuestionValidationError):
            make_question(options=[], correct_answer="")

    def test_marks_must_be_positive(self):
        with self.assertRaises(QuestionValidationError):
            make_question(marks=0)

    def test_negative_marks_cannot_be_below_zero(self):
        with self.assertRaises(QuestionValidationError):
            make_question(has_negative_marking=True, negative_marks=-1)

    def test_score_for_correct_answer_awards_marks(self):
        question = make_question(marks=3)
        self.assertEqual(question.score_for("B"), 3)

    def test_score_for_wrong_answer_without_negative_marking(self):
        question = make_question(marks=3, negative_marks=2)
        self.assertEqual(question.score_for("A"), 0)

    def test_score_for_wrong_answer_with_negative_marking(self):
        question = make_question(marks=2, has_negative_marking=True, negative_marks=1)
        self.assertEqual(question.score_for("A"), -1)

    def test_score_for_unanswered_is_zero(self):
        question = make_question(has_negative_marking=True, negative_marks=5)
        self.assertEqual(question.score_for(None), 0)
        self.assertEqual(question.score_for(""), 0)

    def test_editor_options_pad_short_lists(self):
        question = make_question(options=["A", "B"], correct_answer="B")
        self.assertEqual(question.editor_options(), ["A", "B", "", ""])

    def test_editor_options_keep_every_option_of_long_lists(self):
        options = ["a", "b", "c", "d", "e"]
        question = make_question(options=options, correct_answer="e")
        self.assertEqual(question.editor_options(), options)
        self.assertIn(question.correct_answer, question.editor_options())


class TestDifficulty(unittest.TestCase):

    def test_seconds_per_question(self):
        self.assertEqual(Difficulty.LOW.seconds_per_question, 20)
        self.assertEqual(Difficulty.MEDIUM.seconds_per_question, 30)
        self.assertEqual(Difficulty.HIGH.seconds_per_question, 40)

    def test_difficulty_parses_from_wire_value(self):
        self.assertIs(Difficulty("High"), Difficulty.HIGH)


class TestAuthUser(unittest.TestCase):

    def test_admin_role(self):
        self.assertTrue(AuthUser("root", "admin").is_admin)
        self.assertFalse(AuthUser("alice", "user").is_admin)


if __name__ == "__main__":
    unittest.main()
