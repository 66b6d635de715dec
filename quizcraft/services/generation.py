"""Question generation entry point used by the API and the CLI."""

import logging

from langchain_core.language_models.chat_models import BaseChatModel

from quizcraft.agents.llm import create_chat_model
from quizcraft.config.settings import Settings, get_settings
from quizcraft.errors import GenerationError, MalformedOutputError
from quizcraft.graph.state import create_initial_state
from quizcraft.graph.workflow import compile_workflow
from quizcraft.models.quiz import GeneratedQuestion, GenerationRequest, QuestionDifficulty, QuestionType

logger = logging.getLogger(__name__)


def generate_quiz_questions(
    request: GenerationRequest,
    *,
    llm: BaseChatModel | None = None,
    settings: Settings | None = None,
) -> list[GeneratedQuestion]:
    """
    Generate questions for one request with a single model call.

    Args:
        request: Validated generation parameters
        llm: Chat model to use; built from settings when omitted
        settings: Settings used to build the chat model

    Returns:
        Generated questions in model order

    Raises:
        ConfigurationError: if no credential is configured (before any call)
        MalformedOutputError: if the reply is not the requested JSON shape
        GenerationError: for any other failure, with a generic message
    """
    if llm is None:
        llm = create_chat_model(settings or get_settings())

    workflow = compile_workflow(llm)

    try:
        final_state = workflow.invoke(create_initial_state(request))
    except MalformedOutputError:
        logger.exception("Model output for topic %r could not be used", request.topic)
        raise
    except Exception as e:
        logger.exception("Error generating questions for topic %r", request.topic)
        raise GenerationError() from e

    return final_state["questions"]


def generate_single_question(
    topic: str,
    question_type: QuestionType,
    *,
    llm: BaseChatModel | None = None,
    settings: Settings | None = None,
) -> GeneratedQuestion:
    """
    Generate one medium difficulty question of the given type.

    Raises:
        GenerationError: if the model returned no questions
    """
    request = GenerationRequest(
        topic=topic,
        difficulty=QuestionDifficulty.MEDIUM,
        question_count=1,
        question_types=[question_type],
    )
    questions = generate_quiz_questions(request, llm=llm, settings=settings)
    if not questions:
        logger.error("Model returned an empty list for topic %r", topic)
        raise GenerationError()
    return questions[0]
