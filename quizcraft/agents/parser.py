"""Response Parser Agent - Turns raw model text into generated questions."""

import json
import logging
import re
from typing import Any

from pydantic import TypeAdapter, ValidationError

from quizcraft.errors import MalformedOutputError
from quizcraft.graph.state import GenerationState
from quizcraft.models.quiz import GeneratedQuestion

logger = logging.getLogger(__name__)

# Literal ```json / ``` markers, with the newline that usually follows or precedes them
FENCE_PATTERN = re.compile(r"```json\n?|\n?```")

_question_list = TypeAdapter(list[GeneratedQuestion])


def strip_code_fences(text: str) -> str:
    """Remove markdown JSON fence markers and surrounding whitespace."""
    return FENCE_PATTERN.sub("", text).strip()


def parse_generated_questions(raw_text: str) -> list[GeneratedQuestion]:
    """
    Parse the model's reply into generated questions.

    The whole batch is rejected if any part of it is malformed.

    Args:
        raw_text: Text exactly as returned by the model

    Returns:
        Questions in the order the model produced them

    Raises:
        MalformedOutputError: if the text is not JSON or not the requested shape
    """
    cleaned = strip_code_fences(raw_text)

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Model output is not valid JSON: %s", e)
        logger.debug("Unparseable model output: %s", cleaned)
        raise MalformedOutputError() from e

    if not isinstance(payload, list):
        logger.error("Model output is %s, expected a JSON array", type(payload).__name__)
        raise MalformedOutputError()

    try:
        return _question_list.validate_python(payload)
    except ValidationError as e:
        logger.error("Model output does not match the question schema: %s", e)
        raise MalformedOutputError() from e


def parse_response(state: GenerationState) -> dict[str, Any]:
    """
    Parser Agent: convert raw_text in state into questions.

    Args:
        state: Current generation state containing raw_text

    Returns:
        Dictionary with updated state containing questions
    """
    questions = parse_generated_questions(state["raw_text"] or "")
    logger.info("Parsed %d generated question(s)", len(questions))
    return {"questions": questions}
