"""Business logic shared by the Qt panels."""

from __future__ import annotations

import logging

from quiz_client.api.client import ApiError, QuizApiClient
from quiz_client.api.schemas import QuestionDraft
from quiz_client.core.auth_session import AuthSession
from quiz_client.core.models import Question, QuizSettings
from quiz_client.core.services.question_bank import QuestionBank
from quiz_client.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade for quiz services: API client, auth session and question bank."""

    def __init__(self, api: QuizApiClient, auth: AuthSession) -> None:
        self._api = api
        self._auth = auth
        self._bank = QuestionBank()
        self._api.set_token_provider(lambda: self._auth.token)

    @property
    def auth(self) -> AuthSession:
        return self._auth

    @property
    def bank(self) -> QuestionBank:
        return self._bank

    @property
    def api_base_url(self) -> str:
        return self._api.base_url

    # --- Question bank ---

    def refresh_question_bank(self) -> list[Question]:
        questions = self._api.fetch_questions()
        self._bank.load_questions(questions)
        return questions

    def start_quiz(self, settings: QuizSettings) -> QuizSession:
        """Fetch a fresh copy of the bank and build a session for ``settings``."""
        questions = self._api.fetch_questions()
        self._bank.load_questions(questions)
        return QuizSession(questions, settings)

    # --- Admin ---

    def add_question(self, draft: QuestionDraft) -> bool:
        """Create a question; returns whether the bank could be reloaded afterwards."""
        self._api.create_question(draft)
        logger.info("Added question of type %s", draft.question_type)
        return self._refresh_after_change()

    def update_question(self, question_id: str, draft: QuestionDraft) -> bool:
        self._api.update_question(question_id, draft)
        logger.info("Updated question %s", question_id)
        return self._refresh_after_change()

    def delete_question(self, question_id: str) -> bool:
        self._api.delete_question(question_id)
        logger.info("Deleted question %s", question_id)
        return self._refresh_after_change()

    def _refresh_after_change(self) -> bool:
        # The write already succeeded; a failed reload only leaves the list stale.
        try:
            self.refresh_question_bank()
        except ApiError as exc:
            logger.warning("Question bank reload failed after a change: %s", exc)
            return False
        return True
