"""Application entry point for the QuizDesk client."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_client.api.client import QuizApiClient
from quiz_client.core.auth_session import AuthSession
from quiz_client.core.quiz_manager import QuizManager
from quiz_client.core.token_store import TokenStore
from quiz_client.ui.main_window import QuizMainWindow
from quiz_client.utils.app_config import load_config
from quiz_client.utils.logging_config import configure_logging


def main() -> None:
    """Load configuration, restore any saved session, and launch the Qt UI."""
    config = load_config()
    logger = configure_logging(config.log_level)
    logger.info("Starting QuizDesk against %s", config.api_base_url)

    api = QuizApiClient(base_url=config.api_base_url, timeout=config.request_timeout)
    auth = AuthSession(
        api,
        TokenStore(config.token_file),
        admin_company_key=config.admin_company_key,
    )
    quiz_manager = QuizManager(api, auth)
    auth.initialize()

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_manager=quiz_manager, auth=auth)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
