"""Unit tests for the quiz service HTTP client, with a mocked requests session."""

import unittest
from unittest.mock import Mock

import requests

from quiz_client.api.client import ApiError, QuizApiClient
from quiz_client.api.schemas import QuestionDraft, RegistrationPayload
from quiz_client.constants.quiz_constants import FETCH_FAILED_MESSAGE
from tests.fixtures import question_record


def make_response(status_code=200, body=None, content=b"{}"):
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.content = content
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


class TestQuizApiClient(unittest.TestCase):

    def setUp(self):
        self.session = Mock(spec=requests.Session)
        self.client = QuizApiClient(
            base_url="http://quiz.test/",
            timeout=5,
            token_provider=lambda: "tok",
            session=self.session,
        )

    def test_fetch_questions(self):
        self.session.request.return_value = make_response(
            body={"success": True, "data": [question_record("q1"), question_record("q2")]}
        )

        questions = self.client.fetch_questions()

        self.assertEqual([q.id for q in questions], ["q1", "q2"])
        self.session.request.assert_called_once_with(
            "GET",
            "http://quiz.test/api/questions",
            json=None,
            headers={"Content-Type": "application/json", "Authorization": "Bearer tok"},
            timeout=5,
        )

    def test_fetch_skips_invalid_records(self):
        self.session.request.return_value = make_response(
            body={"data": [question_record("ok"), question_record("bad", correctAnswer="9"), {"_id": "x"}]}
        )
        self.assertEqual([q.id for q in self.client.fetch_questions()], ["ok"])

    def test_fetch_http_error(self):
        self.session.request.return_value = make_response(status_code=500, body=ValueError("no json"))
        with self.assertRaises(ApiError) as ctx:
            self.client.fetch_questions()
        self.assertEqual(str(ctx.exception), FETCH_FAILED_MESSAGE)
        self.assertEqual(ctx.exception.status_code, 500)

    def test_fetch_bad_envelope(self):
        self.session.request.return_value = make_response(body={"success": True})
        with self.assertRaises(ApiError):
            self.client.fetch_questions()

    def test_fetch_connection_failure(self):
        self.session.request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(ApiError) as ctx:
            self.client.fetch_questions()
        self.assertEqual(str(ctx.exception), FETCH_FAILED_MESSAGE)
        self.assertEqual(ctx.exception.status_code, 0)

    def test_fetch_error_ignores_server_message(self):
        self.session.request.return_value = make_response(status_code=500, body={"message": "db down"})
        with self.assertRaises(ApiError) as ctx:
            self.client.fetch_questions()
        self.assertEqual(str(ctx.exception), FETCH_FAILED_MESSAGE)

    def test_admin_connection_failure(self):
        self.session.request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(ApiError) as ctx:
            self.client.delete_question("abc")
        self.assertIn("Could not reach the quiz service", str(ctx.exception))

    def test_no_token_means_no_auth_header(self):
        self.client.set_token_provider(lambda: None)
        self.session.request.return_value = make_response(body={"data": []})
        self.client.fetch_questions()
        headers = self.session.request.call_args.kwargs["headers"]
        self.assertNotIn("Authorization", headers)

    def test_create_question_sends_payload(self):
        self.session.request.return_value = make_response(status_code=201, body={"success": True})
        draft = QuestionDraft(question_text="Q", options=["A", "B"], correct_answer="A")

        self.client.create_question(draft)

        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("POST", "http://quiz.test/api/questions"))
        self.assertEqual(kwargs["json"]["questionText"], "Q")

    def test_update_question_uses_id(self):
        self.session.request.return_value = make_response(body={"success": True})
        draft = QuestionDraft(question_text="Q", options=["A", "B"], correct_answer="A")
        self.client.update_question("abc", draft)
        args, _ = self.session.request.call_args
        self.assertEqual(args, ("PUT", "http://quiz.test/api/questions/abc"))

    def test_delete_error_uses_server_message(self):
        self.session.request.return_value = make_response(status_code=404, body={"message": "Question not found"})
        with self.assertRaises(ApiError) as ctx:
            self.client.delete_question("abc")
        self.assertEqual(str(ctx.exception), "Question not found")

    def test_delete_with_empty_body(self):
        self.session.request.return_value = make_response(status_code=204, content=b"")
        self.client.delete_question("abc")
        args, _ = self.session.request.call_args
        self.assertEqual(args, ("DELETE", "http://quiz.test/api/questions/abc"))

    def test_login_returns_failure_body(self):
        self.session.request.return_value = make_response(
            status_code=401, body={"success": False, "message": "Invalid credentials"}
        )
        response = self.client.login("a@b.c", "pw")
        self.assertFalse(response.success)
        self.assertEqual(response.message, "Invalid credentials")

    def test_register_posts_payload(self):
        self.session.request.return_value = make_response(body={"success": True, "token": "t"})
        payload = RegistrationPayload(
            username="bob", name="Bob", email="b@x.y", age=30, gender="male", password="secret", role="user"
        )
        response = self.client.register(payload)
        self.assertTrue(response.success)
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("POST", "http://quiz.test/api/auth/register"))
        self.assertEqual(kwargs["json"]["role"], "user")

    def test_login_non_json_response(self):
        self.session.request.return_value = make_response(status_code=502, body=ValueError("html"))
        with self.assertRaises(ApiError):
            self.client.login("a@b.c", "pw")


if __name__ == "__main__":
    unittest.main()
