"""Unit tests for scoring a finished quiz."""

import unittest

from quiz_client.core.services.result_summary import summarize
from tests.fixtures import make_question


class TestSummarize(unittest.TestCase):

    def setUp(self):
        self.questions = [
            make_question("q1", marks=2),
            make_question("q2", marks=1, has_negative_marking=True, negative_marks=1),
            make_question("q3", marks=4, has_negative_marking=True, negative_marks=2),
        ]

    def test_all_unattempted(self):
        result = summarize(self.questions, {})
        self.assertEqual(result.score, 0)
        self.assertEqual(result.total_questions, 3)
        self.assertEqual(result.correct, 0)
        self.assertEqual(result.incorrect, 0)
        self.assertEqual(result.unattempted, 3)

    def test_mixed_answers(self):
        result = summarize(self.questions, {"q1": "B", "q2": "A"})
        self.assertEqual(result.score, 1)
        self.assertEqual(result.correct, 1)
        self.assertEqual(result.incorrect, 1)
        self.assertEqual(result.unattempted, 1)

    def test_score_can_be_negative(self):
        result = summarize(self.questions, {"q2": "A", "q3": "C"})
        self.assertEqual(result.score, -3)
        self.assertEqual(result.incorrect, 2)

    def test_empty_answer_counts_as_unattempted(self):
        result = summarize(self.questions, {"q1": ""})
        self.assertEqual(result.unattempted, 3)

    def test_answers_for_unknown_questions_are_ignored(self):
        result = summarize(self.questions, {"other": "B"})
        self.assertEqual(result.correct + result.incorrect, 0)

    def test_counts_always_add_up(self):
        result = summarize(self.questions, {"q1": "A", "q3": "B"})
        self.assertEqual(result.correct + result.incorrect + result.unattempted, result.total_questions)


if __name__ == "__main__":
    unittest.main()
