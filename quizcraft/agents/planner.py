"""Planner Agent - Turns generation parameters into the model prompt."""

from typing import Any

from quizcraft.graph.state import GenerationState
from quizcraft.models.quiz import GenerationRequest

PROMPT_TEMPLATE = """Generate {count} quiz questions about "{topic}" at {difficulty} difficulty level.

Instructions:
- Use these question types: {types}
- For multiple choice questions: provide 4 options with exactly 1 correct answer
- For true/false questions: provide the statement and correct answer
- For short answer questions: provide the question and expected answer
- Make questions educational and engaging
- Ensure answers are factually accurate

Return the response as a JSON array where each question object has:
- text: string (the question)
- type: 'multiple_choice' | 'true_false' | 'short_answer'
- answers: array of objects with {{text: string, isCorrect: boolean}}

For true/false questions, the answers array must contain exactly two objects with text "True" and "False".
For short answer questions, the answers array should contain one object with the expected answer text and isCorrect: true.

Example format:
[
  {{
    "text": "What is the capital of France?",
    "type": "multiple_choice",
    "answers": [
      {{"text": "London", "isCorrect": false}},
      {{"text": "Paris", "isCorrect": true}},
      {{"text": "Berlin", "isCorrect": false}},
      {{"text": "Madrid", "isCorrect": false}}
    ]
  }}
]"""


def build_generation_prompt(request: GenerationRequest) -> str:
    """
    Build the single instruction sent to the model.

    Args:
        request: Validated generation parameters

    Returns:
        Prompt text naming the count, topic, difficulty and allowed types
    """
    return PROMPT_TEMPLATE.format(
        count=request.question_count,
        topic=request.topic,
        difficulty=request.difficulty.value,
        types=", ".join(t.value for t in request.question_types),
    )


def plan_prompt(state: GenerationState) -> dict[str, Any]:
    """
    Planner Agent: build the prompt for the generation request in state.

    Args:
        state: Current generation state containing the request

    Returns:
        Dictionary with updated state containing prompt
    """
    return {"prompt": build_generation_prompt(state["request"])}
