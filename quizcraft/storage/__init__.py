"""Relational storage for quizzes and attempts."""

from .database import create_db_engine, get_db, get_engine, get_session_factory, init_db
from .repository import QuizRepository

__all__ = [
    "create_db_engine",
    "get_db",
    "get_engine",
    "get_session_factory",
    "init_db",
    "QuizRepository",
]
