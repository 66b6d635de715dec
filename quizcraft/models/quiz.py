"""Pydantic models for quiz data structures."""

import uuid
from collections.abc import Sequence
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TRUE_FALSE_OPTIONS = ("True", "False")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestionType(str, Enum):
    """Question types; the type decides the option shape and the grading rule."""

    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    SHORT_ANSWER = "short_answer"


class QuizType(str, Enum):
    """Quiz type tag shown to takers."""

    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    SHORT_ANSWER = "short_answer"
    MIXED = "mixed"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def check_answer_invariants(question_type: QuestionType, answers: Sequence) -> None:
    """
    Enforce the option rules every question type must satisfy.

    Works on anything with ``text`` and ``is_correct`` attributes so the
    stored and the generated representations share one rule set.

    Raises:
        ValueError: if the options break the rules for ``question_type``
    """
    correct_count = sum(1 for answer in answers if answer.is_correct)

    if question_type == QuestionType.MULTIPLE_CHOICE and correct_count > 1:
        raise ValueError("A multiple choice question can have at most one correct option")

    if question_type == QuestionType.TRUE_FALSE:
        texts = sorted(answer.text for answer in answers)
        if texts != sorted(TRUE_FALSE_OPTIONS):
            raise ValueError('A true/false question must have exactly the options "True" and "False"')
        if correct_count > 1:
            raise ValueError("A true/false question can have only one correct option")


class AnswerOption(BaseModel):
    """A selectable option belonging to a multiple choice or true/false question."""

    id: str | None = Field(None, description="Store identifier, None until saved")
    text: str = Field(..., description="Option text shown to the taker")
    is_correct: bool = Field(default=False, alias="isCorrect")
    position: int = Field(default=0, ge=0, description="Display order")

    model_config = ConfigDict(populate_by_name=True)


class Question(BaseModel):
    """A single quiz question."""

    id: str | None = Field(None, description="Store identifier, None until saved")
    text: str = Field(..., min_length=1, description="The question text")
    type: QuestionType = Field(default=QuestionType.MULTIPLE_CHOICE)
    position: int = Field(default=0, ge=0, description="Display order within the quiz")
    options: list[AnswerOption] = Field(default_factory=list)
    reference_answer: str | None = Field(
        None,
        description="Expected answer for short answer questions (display only)",
    )

    @model_validator(mode="after")
    def validate_options(self) -> "Question":
        """Reject option sets that break the rules for this question type."""
        if self.type == QuestionType.SHORT_ANSWER and self.options:
            raise ValueError("Short answer questions do not have answer options")
        check_answer_invariants(self.type, self.options)
        return self

    @property
    def correct_option(self) -> AnswerOption | None:
        """The option flagged correct, if any."""
        return next((option for option in self.options if option.is_correct), None)

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "What is the capital of France?",
                "type": "multiple_choice",
                "options": [
                    {"text": "London", "isCorrect": False},
                    {"text": "Paris", "isCorrect": True},
                    {"text": "Berlin", "isCorrect": False},
                    {"text": "Madrid", "isCorrect": False},
                ],
            }
        }
    }


class Quiz(BaseModel):
    """A quiz with its ordered questions."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str = Field(..., min_length=1, description="Quiz title")
    description: str | None = Field(None, description="Quiz description or instructions")
    quiz_type: QuizType = Field(default=QuizType.MIXED)
    is_published: bool = False
    created_by: str = Field(..., min_length=1, description="Owner identity")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    questions: list[Question] = Field(default_factory=list)

    @field_validator("questions")
    @classmethod
    def sort_questions(cls, v: list[Question]) -> list[Question]:
        """Keep questions in display order."""
        return sorted(v, key=lambda q: q.position)

    @property
    def question_count(self) -> int:
        """Get the number of questions in this quiz."""
        return len(self.questions)


class QuizDraft(BaseModel):
    """Editable quiz content submitted by an author."""

    title: str = Field(..., min_length=1)
    description: str | None = None
    quiz_type: QuizType = Field(default=QuizType.MIXED)
    questions: list[Question] = Field(default_factory=list)
    publish: bool = Field(default=False, description="Publish immediately on save")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Titles cannot be blank."""
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Quiz title cannot be empty")
        return cleaned


class QuizSummary(BaseModel):
    """Quiz listing row, with counts for the owner's dashboard."""

    id: str
    title: str
    description: str | None = None
    quiz_type: QuizType
    is_published: bool
    created_by: str
    created_at: datetime
    updated_at: datetime
    question_count: int = Field(default=0, ge=0)
    response_count: int = Field(default=0, ge=0)


class Identity(BaseModel):
    """The caller on whose behalf an operation runs."""

    user_id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


# Generation request/response models


class GenerationRequest(BaseModel):
    """Parameters for one call to the question generation model."""

    topic: str = Field(..., min_length=1, description="Subject of the questions")
    difficulty: QuestionDifficulty = Field(default=QuestionDifficulty.MEDIUM)
    question_count: int = Field(..., ge=1, alias="questionCount")
    question_types: list[QuestionType] = Field(..., min_length=1, alias="questionTypes")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v: str) -> str:
        """Clean and validate the topic."""
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Topic cannot be empty")
        return cleaned

    @field_validator("question_types")
    @classmethod
    def dedupe_types(cls, v: list[QuestionType]) -> list[QuestionType]:
        """Drop repeated types, keeping the first occurrence."""
        return list(dict.fromkeys(v))


class GeneratedAnswer(BaseModel):
    """An answer as returned by the generation model."""

    text: str
    is_correct: bool = Field(..., alias="isCorrect")

    model_config = ConfigDict(populate_by_name=True)


class GeneratedQuestion(BaseModel):
    """A question suggested by the model, not yet part of any quiz."""

    text: str = Field(..., min_length=1)
    type: QuestionType
    answers: list[GeneratedAnswer]

    @model_validator(mode="after")
    def validate_answers(self) -> "GeneratedQuestion":
        """Apply the same option rules as stored questions."""
        if self.type == QuestionType.SHORT_ANSWER and len(self.answers) > 1:
            raise ValueError("Short answer questions carry at most one expected answer")
        if self.type != QuestionType.SHORT_ANSWER:
            check_answer_invariants(self.type, self.answers)
        return self

    def to_question(self, position: int = 0) -> Question:
        """Convert into an editable draft question."""
        if self.type == QuestionType.SHORT_ANSWER:
            reference = self.answers[0].text if self.answers else None
            return Question(text=self.text, type=self.type, position=position, reference_answer=reference)

        options = [
            AnswerOption(text=answer.text, is_correct=answer.is_correct, position=i)
            for i, answer in enumerate(self.answers)
        ]
        return Question(text=self.text, type=self.type, position=position, options=options)
