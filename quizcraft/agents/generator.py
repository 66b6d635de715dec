"""Question Generator Agent - Sends the prompt to the chat model."""

import logging
from collections.abc import Callable
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage

from quizcraft.errors import GenerationError
from quizcraft.graph.state import GenerationState

logger = logging.getLogger(__name__)


def extract_text(message: BaseMessage) -> str:
    """
    Pull plain text out of a chat model reply.

    Providers return either a string or a list of content blocks.
    """
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def request_questions(state: GenerationState, llm: BaseChatModel) -> dict[str, Any]:
    """
    Question Generator Agent: make the one model call for this request.

    There is no retry; any exception from the client propagates.

    Args:
        state: Current generation state containing prompt
        llm: Chat model to call

    Returns:
        Dictionary with updated state containing raw_text

    Raises:
        GenerationError: if the model replies without any text
    """
    request = state["request"]
    logger.info(
        "Requesting %d question(s) about %r (%s)",
        request.question_count,
        request.topic,
        request.difficulty.value,
    )

    reply = llm.invoke([HumanMessage(content=state["prompt"])])
    text = extract_text(reply)

    if not text or not text.strip():
        logger.error("Model returned no text for topic %r", request.topic)
        raise GenerationError("No response text received from the model")

    return {"raw_text": text}


def make_generator_node(llm: BaseChatModel) -> Callable[[GenerationState], dict[str, Any]]:
    """Bind a chat model into a graph node."""

    def generator_node(state: GenerationState) -> dict[str, Any]:
        return request_questions(state, llm)

    return generator_node
