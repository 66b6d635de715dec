"""Data models for quiz authoring, generation and scoring."""

from .quiz import (
    AnswerOption,
    # Generation models
    GeneratedAnswer,
    GeneratedQuestion,
    GenerationRequest,
    Identity,
    Question,
    QuestionDifficulty,
    QuestionType,
    Quiz,
    QuizDraft,
    QuizSummary,
    QuizType,
)
from .results import (
    QuestionAnalytics,
    QuestionResponse,
    QuestionResult,
    QuizAnalytics,
    QuizResponse,
    ScoreResult,
)

__all__ = [
    "AnswerOption",
    "Question",
    "QuestionType",
    "QuestionDifficulty",
    "Quiz",
    "QuizType",
    "QuizDraft",
    "QuizSummary",
    "Identity",
    "GenerationRequest",
    "GeneratedAnswer",
    "GeneratedQuestion",
    "QuestionResult",
    "ScoreResult",
    "QuestionResponse",
    "QuizResponse",
    "QuestionAnalytics",
    "QuizAnalytics",
]
