"""Request and response bodies that exist only at the HTTP boundary."""

from pydantic import BaseModel, Field

from quizcraft.models.quiz import GeneratedQuestion
from quizcraft.models.results import QuestionResult


class GenerateQuestionsResponse(BaseModel):
    questions: list[GeneratedQuestion]


class PublishUpdate(BaseModel):
    is_published: bool


class SubmissionRequest(BaseModel):
    """One answer per question in display order; null means unanswered."""

    answers: list[str | None] = Field(default_factory=list)


class SubmissionResult(BaseModel):
    response_id: str
    score: int
    total_questions: int
    percentage: int
    results: list[QuestionResult]
