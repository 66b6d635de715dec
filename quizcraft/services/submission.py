"""Quiz-taking and reporting operations shared by the API and the CLI."""

import logging
from collections.abc import Sequence

from quizcraft.models.quiz import Identity
from quizcraft.models.results import QuizAnalytics, QuizResponse, ScoreResult
from quizcraft.scoring.analytics import compute_quiz_analytics
from quizcraft.scoring.evaluator import ensure_complete, evaluate
from quizcraft.storage.repository import QuizRepository

logger = logging.getLogger(__name__)


def submit_attempt(
    repo: QuizRepository,
    quiz_id: str,
    answers: Sequence[str | None],
    identity: Identity | None = None,
) -> tuple[ScoreResult, QuizResponse]:
    """
    Grade and store one attempt at a published quiz.

    Nothing is written unless every question has an answer.

    Args:
        repo: Repository bound to the current session
        quiz_id: Quiz being taken
        answers: One answer per question, in display order
        identity: Taker, None for anonymous attempts

    Returns:
        The grading result and the stored attempt

    Raises:
        QuizNotFoundError: if the quiz is missing or unpublished
        IncompleteSubmissionError: if any question is unanswered
    """
    quiz = repo.get_published_quiz(quiz_id)
    ensure_complete(quiz.questions, answers)

    graded = evaluate(quiz.questions, list(answers))
    stored = repo.record_attempt(quiz, graded, identity)
    logger.info(
        "Attempt %s on quiz %s scored %d/%d",
        stored.id,
        quiz_id,
        graded.score,
        graded.total_questions,
    )
    return graded, stored


def get_quiz_analytics(repo: QuizRepository, quiz_id: str, owner: Identity) -> QuizAnalytics:
    """Aggregate every attempt of a quiz; only its owner may look."""
    quiz = repo.get_owned_quiz(quiz_id, owner)
    return compute_quiz_analytics(quiz, repo.list_all_attempts(quiz_id))
