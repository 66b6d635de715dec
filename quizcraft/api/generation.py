"""Question generation endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from quizcraft.api.deps import LLMFactory, get_llm_factory
from quizcraft.api.schemas import GenerateQuestionsResponse
from quizcraft.errors import RequestValidationFailed
from quizcraft.models.quiz import GenerationRequest
from quizcraft.services.generation import generate_quiz_questions

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Topic, question count, and question types are required"

router = APIRouter(tags=["generation"])


def parse_generation_request(payload: dict[str, Any]) -> GenerationRequest:
    """
    Validate a raw request body.

    Raises:
        RequestValidationFailed: if a required field is missing or a value is invalid
    """
    if not payload.get("topic") or not payload.get("questionCount") or not payload.get("questionTypes"):
        raise RequestValidationFailed(MISSING_FIELDS_MESSAGE)

    try:
        return GenerationRequest.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise RequestValidationFailed(f"Invalid {field}: {first['msg']}") from e


@router.post("/api/generate-questions", response_model=GenerateQuestionsResponse)
def generate_questions(
    payload: dict[str, Any] = Body(...),
    llm_factory: LLMFactory = Depends(get_llm_factory),
):
    request = parse_generation_request(payload)
    logger.info(
        "Generating %d %s question(s) about %r",
        request.question_count,
        request.difficulty.value,
        request.topic,
    )
    questions = generate_quiz_questions(request, llm=llm_factory())
    return GenerateQuestionsResponse(questions=questions)
