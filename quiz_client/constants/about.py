"""Static metadata describing QuizDesk."""

APP_NAME = "QuizDesk"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizDesk is a desktop client for a quiz platform built with Qt. "
    "Pick a category and difficulty, race the clock, and review your score. "
    "Administrators can maintain the question bank from the admin panel."
)
