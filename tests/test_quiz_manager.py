"""Unit tests for the QuizManager facade."""

import unittest
from unittest.mock import Mock

from quiz_client.api.client import ApiError
from quiz_client.api.schemas import QuestionDraft
from quiz_client.core.models import Difficulty, QuizSettings
from quiz_client.core.quiz_manager import QuizManager
from quiz_client.core.services.quiz_session import NoQuestionsFoundError
from tests.fixtures import sample_bank


class TestQuizManager(unittest.TestCase):

    def setUp(self):
        self.api = Mock()
        self.api.fetch_questions.return_value = sample_bank()
        self.auth = Mock()
        self.auth.token = "tok"
        self.manager = QuizManager(self.api, self.auth)

    def test_token_provider_reads_auth_token(self):
        provider = self.api.set_token_provider.call_args.args[0]
        self.assertEqual(provider(), "tok")
        self.auth.token = None
        self.assertIsNone(provider())

    def test_refresh_loads_bank(self):
        self.manager.refresh_question_bank()
        self.assertEqual(self.manager.bank.get_question_count(), 5)

    def test_start_quiz_fetches_fresh_questions(self):
        session = self.manager.start_quiz(QuizSettings("Aptitude", Difficulty.MEDIUM))
        self.api.fetch_questions.assert_called_once_with()
        self.assertEqual([q.id for q in session.get_questions()], ["a1", "a2"])

    def test_start_quiz_without_matches(self):
        with self.assertRaises(NoQuestionsFoundError):
            self.manager.start_quiz(QuizSettings("Coding", Difficulty.HIGH))

    def test_start_quiz_propagates_fetch_errors(self):
        self.api.fetch_questions.side_effect = ApiError("Could not fetch quiz data.")
        with self.assertRaises(ApiError):
            self.manager.start_quiz(QuizSettings("Mixed", Difficulty.LOW))

    def test_admin_changes_refresh_bank(self):
        draft = QuestionDraft(question_text="Q", options=["A", "B"], correct_answer="A")
        self.assertTrue(self.manager.add_question(draft))
        self.assertTrue(self.manager.update_question("a1", draft))
        self.assertTrue(self.manager.delete_question("a1"))

        self.api.create_question.assert_called_once_with(draft)
        self.api.update_question.assert_called_once_with("a1", draft)
        self.api.delete_question.assert_called_once_with("a1")
        self.assertEqual(self.api.fetch_questions.call_count, 3)

    def test_admin_change_survives_failed_reload(self):
        draft = QuestionDraft(question_text="Q", options=["A", "B"], correct_answer="A")
        self.manager.refresh_question_bank()
        self.api.fetch_questions.side_effect = ApiError("Could not fetch quiz data.")

        self.assertFalse(self.manager.add_question(draft))
        self.assertFalse(self.manager.update_question("a1", draft))
        self.assertFalse(self.manager.delete_question("a1"))

        self.api.create_question.assert_called_once_with(draft)
        self.api.update_question.assert_called_once_with("a1", draft)
        self.api.delete_question.assert_called_once_with("a1")
        self.assertEqual(self.manager.bank.get_question_count(), 5)

    def test_failed_change_skips_refresh(self):
        self.api.delete_question.side_effect = ApiError("Question not found", 404)
        with self.assertRaises(ApiError):
            self.manager.delete_question("zzz")
        self.api.fetch_questions.assert_not_called()


if __name__ == "__main__":
    unittest.main()
