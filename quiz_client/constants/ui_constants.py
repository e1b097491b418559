"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizDesk"
NAV_BRAND: str = "Quiz Platform"
NAV_WELCOME_TEMPLATE: str = "Welcome, {username}"
NAV_ADMIN_BUTTON: str = "Admin Panel"
NAV_LOGIN_BUTTON: str = "Login"
NAV_REGISTER_BUTTON: str = "Register"
NAV_LOGOUT_BUTTON: str = "Logout"
NAV_ABOUT_BUTTON: str = "About"

LOGIN_TITLE_USER: str = "User Sign In"
LOGIN_TITLE_ADMIN: str = "Admin Sign In"
LOGIN_SUBTITLE: str = "Sign Into Your Account"
LOGIN_ADMIN_TOGGLE: str = "Sign in as admin"
LOGIN_BUTTON: str = "Login"
LOGIN_REDIRECT: str = "Don't have an account? Sign Up"

REGISTER_TITLE: str = "Create Account"
REGISTER_SUBTITLE: str = "Get started with your new account"
REGISTER_BUTTON: str = "Register"
REGISTER_REDIRECT: str = "Already have an account? Sign In"
GENDER_CHOICES: tuple[str, ...] = ("male", "female", "other")

DASHBOARD_TITLE: str = "Select a Quiz"
DASHBOARD_MIXED_TITLE: str = "Mixed Topics"
DASHBOARD_COUNT_TEMPLATE: str = "{count} Questions Available"
DASHBOARD_DIFFICULTY_PROMPT: str = "Select Difficulty:"
DASHBOARD_LOADING: str = "Loading Quizzes..."
LOGIN_REQUIRED_TITLE: str = "Login Required"
LOGIN_REQUIRED_MESSAGE: str = "You must be logged in to attempt a quiz."

QUIZ_TITLE_TEMPLATE: str = "{quiz_type} Quiz"
QUIZ_PROGRESS_TEMPLATE: str = "Question {number} / {total}"
QUIZ_BACK_BUTTON: str = "Back"
QUIZ_NEXT_BUTTON: str = "Next"
QUIZ_SUBMIT_BUTTON: str = "Submit Quiz"
QUIZ_CONFIRM_SUBMIT: str = "Are you sure you want to submit?"
QUIZ_TRACKER_TOGGLE: str = "Toggle Navigator"
QUESTION_FONT_SIZE: int = 14
TRACKER_LEGEND: tuple[tuple[str, str], ...] = (
    ("answered", "Answered"),
    ("viewed", "Viewed"),
    ("not_viewed", "Not Viewed"),
)
BACK_TO_DASHBOARD: str = "Back to Dashboard"

RESULT_TITLE: str = "Quiz Completed!"
RESULT_SCORE_CAPTION: str = "Your Final Score"

ADMIN_TITLE: str = "Quiz Admin Panel"
ADMIN_ADD_TITLE: str = "Add New Question"
ADMIN_EDIT_TITLE: str = "Edit Question"
ADMIN_ADD_BUTTON: str = "Add Question"
ADMIN_SAVE_BUTTON: str = "Save Changes"
ADMIN_EDIT_BUTTON: str = "Edit"
ADMIN_DELETE_BUTTON: str = "Delete"
ADMIN_FILTER_LABEL: str = "Filter by Type:"
ADMIN_LIST_TEMPLATE: str = "Existing Questions ({count})"
ADMIN_TYPE_PLACEHOLDER: str = "e.g., Aptitude, Coding"
ADMIN_STALE_LIST_MESSAGE: str = "The change was saved, but the question list could not be reloaded."
PLACEHOLDER_QUESTION: str = "Enter your question text (supports Markdown + LaTeX)."
