"""Tests for quiz analytics."""

from datetime import datetime, timedelta, timezone

from quizcraft.models.quiz import Quiz
from quizcraft.models.results import QuestionResponse, QuizResponse
from quizcraft.scoring.analytics import NO_ANSWER, RECENT_RESPONSE_LIMIT, compute_quiz_analytics

START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_attempt(n: int, answers: list[str | None], flags: list[bool]) -> QuizResponse:
    question_ids = ["q-paris", "q-rome", "q-photo"]
    return QuizResponse(
        id=f"attempt-{n}",
        quiz_id="quiz-1",
        user_id=f"user-{n}",
        score=sum(flags),
        total_questions=3,
        completed_at=START - timedelta(minutes=n),
        question_responses=[
            QuestionResponse(id=f"{n}-{i}", question_id=qid, selected_answer=a, is_correct=f)
            for i, (qid, a, f) in enumerate(zip(question_ids, answers, flags))
        ],
    )


class TestComputeQuizAnalytics:
    """Test aggregate statistics."""

    def test_no_attempts(self, sample_quiz: Quiz):
        """Test that an unattempted quiz reports zeros."""
        report = compute_quiz_analytics(sample_quiz, [])

        assert report.total_responses == 0
        assert report.average_score == 0
        assert report.highest_score == 0
        assert report.lowest_score == 0
        assert report.completion_rate == 100
        assert all(qa.total_responses == 0 for qa in report.question_analytics)

    def test_quiz_level_figures(self, sample_quiz: Quiz):
        """Test average, highest and lowest score."""
        attempts = [
            make_attempt(0, ["Paris", "False", "x"], [True, True, True]),
            make_attempt(1, ["London", "True", "y"], [False, False, True]),
        ]

        report = compute_quiz_analytics(sample_quiz, attempts)

        assert report.total_responses == 2
        assert report.average_score == 2.0
        assert report.highest_score == 3
        assert report.lowest_score == 1

    def test_per_question_figures(self, sample_quiz: Quiz):
        """Test correct counts, accuracy and the answer histogram."""
        attempts = [
            make_attempt(0, ["Paris", "False", "x"], [True, True, True]),
            make_attempt(1, ["London", "True", "y"], [False, False, True]),
            make_attempt(2, ["Paris", None, "z"], [True, False, True]),
        ]

        report = compute_quiz_analytics(sample_quiz, attempts)
        paris, rome, _ = report.question_analytics

        assert paris.question_text == "What is the capital of France?"
        assert paris.correct_responses == 2
        assert paris.incorrect_responses == 1
        assert round(paris.accuracy_rate, 2) == 66.67
        assert paris.responses == {"Paris": 2, "London": 1}
        assert rome.responses == {"False": 1, "True": 1, NO_ANSWER: 1}

    def test_recent_responses_are_capped(self, sample_quiz: Quiz):
        """Test that only the newest attempts are listed."""
        attempts = [make_attempt(n, ["Paris", "False", "x"], [True, True, True]) for n in range(15)]

        report = compute_quiz_analytics(sample_quiz, attempts)

        assert len(report.recent_responses) == RECENT_RESPONSE_LIMIT
        assert report.recent_responses[0].id == "attempt-0"
