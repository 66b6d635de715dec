"""State carried through the question generation graph."""

from typing import TypedDict

from quizcraft.models.quiz import GeneratedQuestion, GenerationRequest


class GenerationState(TypedDict):
    """State shared by the planner, generator and parser nodes."""

    request: GenerationRequest
    prompt: str | None
    raw_text: str | None
    questions: list[GeneratedQuestion]


def create_initial_state(request: GenerationRequest) -> GenerationState:
    """
    Create the starting state for one generation request.

    Args:
        request: Validated generation parameters

    Returns:
        GenerationState with nothing generated yet
    """
    return {
        "request": request,
        "prompt": None,
        "raw_text": None,
        "questions": [],
    }
