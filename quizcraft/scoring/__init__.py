"""Grading, quiz-taking state and analytics."""

from .analytics import compute_quiz_analytics
from .evaluator import ensure_complete, evaluate, is_answer_correct, is_submission_complete
from .session import QuizSession

__all__ = [
    "evaluate",
    "is_answer_correct",
    "is_submission_complete",
    "ensure_complete",
    "QuizSession",
    "compute_quiz_analytics",
]
