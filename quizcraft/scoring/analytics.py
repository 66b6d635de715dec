"""Aggregate statistics over every recorded attempt of a quiz."""

from collections import Counter
from collections.abc import Sequence

from quizcraft.models.quiz import Quiz
from quizcraft.models.results import QuestionAnalytics, QuizAnalytics, QuizResponse

NO_ANSWER = "No answer"
RECENT_RESPONSE_LIMIT = 10


def _question_analytics(question_id: str, question_text: str, attempts: Sequence[QuizResponse]) -> QuestionAnalytics:
    responses = [
        qr for attempt in attempts for qr in attempt.question_responses if qr.question_id == question_id
    ]
    total = len(responses)
    correct = sum(1 for qr in responses if qr.is_correct)
    histogram = Counter(qr.selected_answer or NO_ANSWER for qr in responses)

    return QuestionAnalytics(
        question_id=question_id,
        question_text=question_text,
        total_responses=total,
        correct_responses=correct,
        incorrect_responses=total - correct,
        accuracy_rate=(correct / total) * 100 if total else 0.0,
        responses=dict(histogram),
    )


def compute_quiz_analytics(quiz: Quiz, attempts: Sequence[QuizResponse]) -> QuizAnalytics:
    """
    Summarize every attempt of a quiz for its owner.

    Args:
        quiz: Quiz with its questions
        attempts: All attempts, newest first

    Returns:
        QuizAnalytics with quiz-level and per-question figures
    """
    scores = [a.score for a in attempts]

    return QuizAnalytics(
        quiz_id=quiz.id,
        total_responses=len(attempts),
        average_score=sum(scores) / len(scores) if scores else 0.0,
        highest_score=max(scores) if scores else 0,
        lowest_score=min(scores) if scores else 0,
        # only complete attempts can be recorded
        completion_rate=100.0,
        question_analytics=[
            _question_analytics(q.id, q.text, attempts) for q in quiz.questions if q.id is not None
        ],
        recent_responses=list(attempts[:RECENT_RESPONSE_LIMIT]),
    )
