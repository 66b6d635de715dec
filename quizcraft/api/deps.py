"""FastAPI dependencies: caller identity, repository and chat model factory."""

from collections.abc import Callable

from fastapi import Depends, Header
from langchain_core.language_models.chat_models import BaseChatModel
from sqlalchemy.orm import Session

from quizcraft.agents.llm import create_chat_model
from quizcraft.config.settings import get_settings
from quizcraft.errors import AuthenticationRequired
from quizcraft.models.quiz import Identity
from quizcraft.storage.database import get_db
from quizcraft.storage.repository import QuizRepository

LLMFactory = Callable[[], BaseChatModel]


def get_identity(x_user_id: str | None = Header(default=None, alias="X-User-Id")) -> Identity | None:
    """Resolve the caller from the X-User-Id header; blank means anonymous."""
    if x_user_id is None or not x_user_id.strip():
        return None
    return Identity(user_id=x_user_id.strip())


def require_identity(identity: Identity | None = Depends(get_identity)) -> Identity:
    if identity is None:
        raise AuthenticationRequired()
    return identity


def get_repository(db: Session = Depends(get_db)) -> QuizRepository:
    return QuizRepository(db)


def get_llm_factory() -> LLMFactory:
    """
    Return a callable that builds the chat model.

    The model is built lazily so request validation runs before the
    credential check.
    """
    return lambda: create_chat_model(get_settings())
