"""Models for graded attempts, stored responses and analytics."""

from datetime import datetime

from pydantic import BaseModel, Field


class QuestionResult(BaseModel):
    """Grading outcome for one question."""

    question_id: str | None
    selected_answer: str | None
    is_correct: bool


class ScoreResult(BaseModel):
    """Output of the scoring evaluator."""

    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    results: list[QuestionResult] = Field(default_factory=list)

    @property
    def percentage(self) -> int:
        """Score as a rounded percentage."""
        if self.total_questions == 0:
            return 0
        return round(self.score / self.total_questions * 100)


class QuestionResponse(BaseModel):
    """A stored answer to one question within an attempt."""

    id: str
    question_id: str
    selected_answer: str | None = None
    is_correct: bool


class QuizResponse(BaseModel):
    """A stored attempt."""

    id: str
    quiz_id: str
    user_id: str | None = None
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    completed_at: datetime
    question_responses: list[QuestionResponse] = Field(default_factory=list)


class QuestionAnalytics(BaseModel):
    """Per-question aggregate over every attempt of a quiz."""

    question_id: str
    question_text: str
    total_responses: int = 0
    correct_responses: int = 0
    incorrect_responses: int = 0
    accuracy_rate: float = Field(default=0.0, ge=0.0, le=100.0)
    responses: dict[str, int] = Field(
        default_factory=dict,
        description="How many times each answer was submitted",
    )


class QuizAnalytics(BaseModel):
    """Quiz-level aggregate shown to the owner."""

    quiz_id: str
    total_responses: int = 0
    average_score: float = 0.0
    highest_score: int = 0
    lowest_score: int = 0
    completion_rate: float = 100.0
    question_analytics: list[QuestionAnalytics] = Field(default_factory=list)
    recent_responses: list[QuizResponse] = Field(default_factory=list)
