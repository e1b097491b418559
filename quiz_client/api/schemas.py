"""Pydantic models describing the quiz service wire format."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from quiz_client.constants.quiz_constants import (
    DEFAULT_MARKS,
    DEFAULT_QUESTION_TYPE,
    MIN_OPTIONS_PER_QUESTION,
)
from quiz_client.core.models import Difficulty, Question


class QuestionRecord(BaseModel):
    """A question as returned by ``GET /api/questions``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    question_text: str = Field(alias="questionText")
    options: list[str]
    correct_answer: str = Field(alias="correctAnswer")
    question_type: str = Field(alias="questionType")
    difficulty: Difficulty = Difficulty.MEDIUM
    marks: int = DEFAULT_MARKS
    has_negative_marking: bool = Field(default=False, alias="hasNegativeMarking")
    negative_marks: int = Field(default=0, alias="negativeMarks")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @field_validator("difficulty", mode="before")
    @classmethod
    def _default_difficulty(cls, value: object) -> object:
        return value or Difficulty.MEDIUM

    @field_validator("marks", mode="before")
    @classmethod
    def _default_marks(cls, value: object) -> object:
        return value or DEFAULT_MARKS

    @field_validator("negative_marks", mode="before")
    @classmethod
    def _default_negative_marks(cls, value: object) -> object:
        return value or 0

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            question_text=self.question_text,
            options=list(self.options),
            correct_answer=self.correct_answer,
            question_type=self.question_type,
            difficulty=self.difficulty,
            marks=self.marks,
            has_negative_marking=self.has_negative_marking,
            negative_marks=self.negative_marks,
            created_at=self.created_at,
        )


class QuestionListResponse(BaseModel):
    """Envelope of ``GET /api/questions``; records are validated one by one."""

    data: list[dict]


class QuestionDraft(BaseModel):
    """Payload for creating or updating a question from the admin panel."""

    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(alias="questionText")
    options: list[str]
    correct_answer: str = Field(alias="correctAnswer")
    question_type: str = Field(default=DEFAULT_QUESTION_TYPE, alias="questionType")
    difficulty: Difficulty = Difficulty.MEDIUM
    marks: int = Field(default=DEFAULT_MARKS, ge=1)
    has_negative_marking: bool = Field(default=False, alias="hasNegativeMarking")
    negative_marks: int = Field(default=0, ge=0, alias="negativeMarks")

    @field_validator("question_text", "question_type")
    @classmethod
    def _require_text(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator("options")
    @classmethod
    def _drop_blank_options(cls, value: list[str]) -> list[str]:
        cleaned = [option.strip() for option in value if option.strip()]
        if len(cleaned) < MIN_OPTIONS_PER_QUESTION:
            raise ValueError(f"at least {MIN_OPTIONS_PER_QUESTION} options are required")
        return cleaned

    @model_validator(mode="after")
    def _check_answer_and_penalty(self) -> "QuestionDraft":
        if self.correct_answer.strip() not in self.options:
            raise ValueError("the correct answer must be one of the options")
        self.correct_answer = self.correct_answer.strip()
        if not self.has_negative_marking:
            self.negative_marks = 0
        return self

    @classmethod
    def from_question(cls, question: Question) -> "QuestionDraft":
        return cls(
            question_text=question.question_text,
            options=list(question.options),
            correct_answer=question.correct_answer,
            question_type=question.question_type,
            difficulty=question.difficulty,
            marks=question.marks,
            has_negative_marking=question.has_negative_marking,
            negative_marks=question.negative_marks,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class AuthResponse(BaseModel):
    """Body returned by the login and register endpoints."""

    success: bool = False
    token: str | None = None
    message: str | None = None


class RegistrationPayload(BaseModel):
    username: str
    name: str
    email: str
    age: int
    gender: str
    password: str
    role: str
