"""Network configuration constants for the quiz client."""

DEFAULT_API_BASE_URL: str = "http://localhost:5000"
REQUEST_TIMEOUT_SECONDS: float = 10.0

QUESTIONS_ENDPOINT: str = "/api/questions"
LOGIN_ENDPOINT: str = "/api/auth/login"
REGISTER_ENDPOINT: str = "/api/auth/register"
