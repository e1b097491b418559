"""Runtime configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from quiz_client.constants.network_constants import DEFAULT_API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from quiz_client.constants.quiz_constants import DEFAULT_ADMIN_COMPANY_KEY

DEFAULT_TOKEN_FILE = Path.home() / ".quizdesk" / "storage.json"


@dataclass(frozen=True, slots=True)
class AppConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = REQUEST_TIMEOUT_SECONDS
    token_file: Path = DEFAULT_TOKEN_FILE
    log_level: str = "INFO"
    admin_company_key: str = DEFAULT_ADMIN_COMPANY_KEY


def load_config(env_file: Path | None = None) -> AppConfig:
    """Build an ``AppConfig`` from ``QUIZ_*`` environment variables."""
    load_dotenv(env_file)

    timeout_raw = os.getenv("QUIZ_REQUEST_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else REQUEST_TIMEOUT_SECONDS
    except ValueError as exc:
        raise ValueError(f"QUIZ_REQUEST_TIMEOUT must be a number, got {timeout_raw!r}") from exc

    token_file = os.getenv("QUIZ_TOKEN_FILE")
    return AppConfig(
        api_base_url=os.getenv("QUIZ_API_BASE_URL", DEFAULT_API_BASE_URL),
        request_timeout=timeout,
        token_file=Path(token_file).expanduser() if token_file else DEFAULT_TOKEN_FILE,
        log_level=os.getenv("QUIZ_LOG_LEVEL", "INFO").upper(),
        admin_company_key=os.getenv("QUIZ_ADMIN_COMPANY_KEY", DEFAULT_ADMIN_COMPANY_KEY),
    )
