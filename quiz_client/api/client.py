"""HTTP client for the external quiz service.

Every request goes through a shared ``requests.Session``. When a token
provider is configured its token is attached as a bearer credential.
"""

from __future__ import annotations

import logging
from typing import Callable

import requests
from pydantic import ValidationError

from quiz_client.api.schemas import (
    AuthResponse,
    QuestionDraft,
    QuestionListResponse,
    QuestionRecord,
    RegistrationPayload,
)
from quiz_client.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    LOGIN_ENDPOINT,
    QUESTIONS_ENDPOINT,
    REGISTER_ENDPOINT,
    REQUEST_TIMEOUT_SECONDS,
)
from quiz_client.constants.quiz_constants import FETCH_FAILED_MESSAGE
from quiz_client.core.models import Question, QuestionValidationError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the quiz service cannot be reached or rejects a request."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuizApiClient:
    """Thin wrapper around the questions and auth endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        token_provider: Callable[[], str | None] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._token_provider = token_provider
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_token_provider(self, token_provider: Callable[[], str | None] | None) -> None:
        self._token_provider = token_provider

    # --- Questions ---

    def fetch_questions(self) -> list[Question]:
        """Fetch the whole question bank, skipping records that fail validation."""
        try:
            body = self._request_json("GET", QUESTIONS_ENDPOINT, error_message=FETCH_FAILED_MESSAGE)
        except ApiError as exc:
            raise ApiError(FETCH_FAILED_MESSAGE, exc.status_code) from exc
        try:
            envelope = QuestionListResponse.model_validate(body)
        except ValidationError as exc:
            raise ApiError(FETCH_FAILED_MESSAGE) from exc

        questions: list[Question] = []
        for raw in envelope.data:
            try:
                questions.append(QuestionRecord.model_validate(raw).to_question())
            except (ValidationError, QuestionValidationError) as exc:
                logger.warning("Skipping invalid question %s: %s", raw.get("_id", "<unknown>"), exc)
        logger.info("Fetched %d questions", len(questions))
        return questions

    def create_question(self, draft: QuestionDraft) -> None:
        self._request_json(
            "POST",
            QUESTIONS_ENDPOINT,
            payload=draft.to_payload(),
            error_message="Failed to add question",
        )

    def update_question(self, question_id: str, draft: QuestionDraft) -> None:
        self._request_json(
            "PUT",
            f"{QUESTIONS_ENDPOINT}/{question_id}",
            payload=draft.to_payload(),
            error_message="Failed to update question",
        )

    def delete_question(self, question_id: str) -> None:
        self._request_json(
            "DELETE",
            f"{QUESTIONS_ENDPOINT}/{question_id}",
            error_message="Failed to delete question.",
        )

    # --- Auth ---

    def login(self, email: str, password: str) -> AuthResponse:
        return self._auth_request(LOGIN_ENDPOINT, {"email": email, "password": password})

    def register(self, payload: RegistrationPayload) -> AuthResponse:
        return self._auth_request(REGISTER_ENDPOINT, payload.model_dump())

    # --- Internals ---

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._token_provider() if self._token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method: str, path: str, payload: dict | None = None) -> requests.Response:
        url = f"{self._base_url}{path}"
        try:
            return self._session.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Could not reach the quiz service: {exc}") from exc

    def _request_json(
        self,
        method: str,
        path: str,
        payload: dict | None = None,
        error_message: str = "Request failed",
    ) -> dict:
        resp = self._send(method, path, payload)
        if not resp.ok:
            logger.warning("%s %s returned HTTP %s", method, path, resp.status_code)
            raise ApiError(_server_message(resp) or error_message, resp.status_code)
        if not resp.content:
            return {}
        try:
            body = resp.json()
        except ValueError as exc:
            raise ApiError(error_message, resp.status_code) from exc
        return body if isinstance(body, dict) else {"data": body}

    def _auth_request(self, path: str, payload: dict) -> AuthResponse:
        resp = self._send("POST", path, payload)
        try:
            body = resp.json()
        except ValueError as exc:
            raise ApiError(f"Unexpected response from {path}", resp.status_code) from exc
        try:
            return AuthResponse.model_validate(body)
        except ValidationError as exc:
            raise ApiError(f"Unexpected response from {path}", resp.status_code) from exc


def _server_message(resp: requests.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        return str(message) if message else None
    return None
