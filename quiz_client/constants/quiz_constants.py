"""Quiz-related constants shared across UI and core layers."""

MIXED_QUIZ_TYPE: str = "Mixed"
ALL_TYPES_FILTER: str = "All"
DEFAULT_QUESTION_TYPE: str = "Aptitude"

DEFAULT_SECONDS_PER_QUESTION: int = 30
SECONDS_PER_QUESTION: dict[str, int] = {
    "Low": 20,
    "Medium": 30,
    "High": 40,
}
TIMER_TICK_INTERVAL_SECONDS: int = 1
TIMER_WARNING_THRESHOLD_SECONDS: int = 15

DEFAULT_MARKS: int = 1
MIN_OPTIONS_PER_QUESTION: int = 2
EDITOR_OPTION_SLOTS: int = 4

NO_QUESTIONS_FOUND_MESSAGE: str = "No questions found for the selected criteria."
FETCH_FAILED_MESSAGE: str = "Could not fetch quiz data."

TOKEN_STORAGE_KEY: str = "token"
ADMIN_ROLE: str = "admin"
USER_ROLE: str = "user"
MIN_PASSWORD_LENGTH: int = 6
DEFAULT_ADMIN_COMPANY_KEY: str = "SUPER_SECRET_KEY_123"
