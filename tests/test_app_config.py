"""Unit tests for environment-driven configuration."""

import os
import unittest
from pathlib import Path
from unittest.mock import patch

from quiz_client.utils.app_config import DEFAULT_TOKEN_FILE, load_config

_MISSING_ENV_FILE = Path(__file__).parent / "does-not-exist.env"


class TestLoadConfig(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = load_config(_MISSING_ENV_FILE)
        self.assertEqual(config.api_base_url, "http://localhost:5000")
        self.assertEqual(config.request_timeout, 10.0)
        self.assertEqual(config.token_file, DEFAULT_TOKEN_FILE)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.admin_company_key, "SUPER_SECRET_KEY_123")

    @patch.dict(os.environ, {
        "QUIZ_API_BASE_URL": "https://quiz.example.com",
        "QUIZ_REQUEST_TIMEOUT": "2.5",
        "QUIZ_TOKEN_FILE": "/tmp/quiz/token.json",
        "QUIZ_LOG_LEVEL": "debug",
        "QUIZ_ADMIN_COMPANY_KEY": "k",
    }, clear=True)
    def test_environment_overrides(self):
        config = load_config(_MISSING_ENV_FILE)
        self.assertEqual(config.api_base_url, "https://quiz.example.com")
        self.assertEqual(config.request_timeout, 2.5)
        self.assertEqual(config.token_file, Path("/tmp/quiz/token.json"))
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.admin_company_key, "k")

    @patch.dict(os.environ, {"QUIZ_REQUEST_TIMEOUT": "soon"}, clear=True)
    def test_bad_timeout(self):
        with self.assertRaises(ValueError):
            load_config(_MISSING_ENV_FILE)


if __name__ == "__main__":
    unittest.main()
