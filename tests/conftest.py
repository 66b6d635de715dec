"""Shared test fixtures and configuration for pytest."""

import json
from collections.abc import Callable, Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quizcraft.api.app import create_app
from quizcraft.api.deps import get_llm_factory
from quizcraft.models.quiz import (
    AnswerOption,
    GenerationRequest,
    Identity,
    Question,
    QuestionDifficulty,
    QuestionType,
    Quiz,
    QuizDraft,
    QuizType,
)
from quizcraft.storage.database import get_db
from quizcraft.storage.orm import Base
from quizcraft.storage.repository import QuizRepository


@pytest.fixture
def sample_generation_request() -> GenerationRequest:
    """Create a sample GenerationRequest for testing."""
    return GenerationRequest(
        topic="World Geography",
        difficulty=QuestionDifficulty.MEDIUM,
        question_count=3,
        question_types=[QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE],
    )


@pytest.fixture
def sample_question() -> Question:
    """Create a sample multiple choice Question for testing."""
    return Question(
        id="q-paris",
        text="What is the capital of France?",
        type=QuestionType.MULTIPLE_CHOICE,
        options=[
            AnswerOption(text="London", is_correct=False, position=0),
            AnswerOption(text="Paris", is_correct=True, position=1),
            AnswerOption(text="Berlin", is_correct=False, position=2),
            AnswerOption(text="Madrid", is_correct=False, position=3),
        ],
    )


@pytest.fixture
def sample_questions(sample_question: Question) -> list[Question]:
    """One question of each type, in display order."""
    return [
        sample_question,
        Question(
            id="q-rome",
            text="Rome was founded before Athens.",
            type=QuestionType.TRUE_FALSE,
            position=1,
            options=[
                AnswerOption(text="True", is_correct=False, position=0),
                AnswerOption(text="False", is_correct=True, position=1),
            ],
        ),
        Question(
            id="q-photo",
            text="Describe photosynthesis in one sentence.",
            type=QuestionType.SHORT_ANSWER,
            position=2,
            reference_answer="Plants turn light into chemical energy.",
        ),
    ]


@pytest.fixture
def sample_quiz(sample_questions: list[Question]) -> Quiz:
    """Create a sample published Quiz for testing."""
    return Quiz(
        id="quiz-1",
        title="Test Quiz",
        description="A comprehensive test quiz",
        quiz_type=QuizType.MIXED,
        is_published=True,
        created_by="owner-1",
        questions=sample_questions,
    )


@pytest.fixture
def sample_draft(sample_questions: list[Question]) -> QuizDraft:
    """Draft with one question of each type, published on save."""
    questions = [q.model_copy(update={"id": None}) for q in sample_questions]
    return QuizDraft(
        title="Test Quiz",
        description="A comprehensive test quiz",
        quiz_type=QuizType.MIXED,
        questions=questions,
        publish=True,
    )


@pytest.fixture
def owner() -> Identity:
    return Identity(user_id="owner-1")


@pytest.fixture
def other_user() -> Identity:
    return Identity(user_id="someone-else")


@pytest.fixture
def generated_payload() -> list[dict[str, Any]]:
    """Well-formed model output for two true/false questions about Rome."""
    return [
        {
            "text": "Rome was founded in 753 BC according to legend.",
            "type": "true_false",
            "answers": [
                {"text": "True", "isCorrect": True},
                {"text": "False", "isCorrect": False},
            ],
        },
        {
            "text": "The Colosseum is in Athens.",
            "type": "true_false",
            "answers": [
                {"text": "True", "isCorrect": False},
                {"text": "False", "isCorrect": True},
            ],
        },
    ]


@pytest.fixture
def generated_json(generated_payload: list[dict[str, Any]]) -> str:
    return json.dumps(generated_payload)


@pytest.fixture
def make_fake_llm() -> Callable[..., FakeListChatModel]:
    """Factory for a chat model that replays canned replies in order."""

    def _make(*responses: str) -> FakeListChatModel:
        return FakeListChatModel(responses=list(responses))

    return _make


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> sessionmaker[Session]:
    return sessionmaker(bind=db_engine, autoflush=False)


@pytest.fixture
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repo(db_session: Session) -> QuizRepository:
    return QuizRepository(db_session)


@pytest.fixture
def llm_replies() -> list[str]:
    """Replies the API test client's fake model returns; tests override as needed."""
    return []


@pytest.fixture
def client(session_factory, llm_replies: list[str]) -> Iterator[TestClient]:
    """API client wired to the in-memory database and a fake chat model."""
    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    def override_llm_factory():
        return lambda: FakeListChatModel(responses=llm_replies or ["[]"])

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_factory] = override_llm_factory

    with TestClient(app) as test_client:
        yield test_client
