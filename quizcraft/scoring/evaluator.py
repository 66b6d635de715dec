"""Scoring evaluator - grades submitted answers against a quiz's answer key."""

from collections.abc import Sequence

from quizcraft.errors import IncompleteSubmissionError
from quizcraft.models.quiz import Question, QuestionType
from quizcraft.models.results import QuestionResult, ScoreResult


def is_answer_correct(question: Question, answer: str | None) -> bool:
    """
    Decide whether one answer is correct.

    Choice questions compare against the correct option's text exactly, with
    no case folding or trimming. Short answer questions accept any non-blank
    text; the reference answer is never consulted.

    Args:
        question: Question being graded
        answer: Submitted answer, None when unanswered

    Returns:
        True if the answer counts as correct
    """
    if question.type == QuestionType.SHORT_ANSWER:
        return answer is not None and answer.strip() != ""

    correct = question.correct_option
    if correct is None or answer is None:
        return False
    return answer == correct.text


def is_submission_complete(questions: Sequence[Question], answers: Sequence[str | None]) -> bool:
    """Every question has a non-null answer."""
    return len(answers) == len(questions) and all(a is not None for a in answers)


def ensure_complete(questions: Sequence[Question], answers: Sequence[str | None]) -> None:
    """
    Completion gate checked before grading.

    Raises:
        IncompleteSubmissionError: if any question is unanswered
    """
    if not is_submission_complete(questions, answers):
        answered = sum(1 for a in answers[: len(questions)] if a is not None)
        raise IncompleteSubmissionError(answered=answered, total=len(questions))


def evaluate(questions: Sequence[Question], answers: Sequence[str | None]) -> ScoreResult:
    """
    Grade a full set of answers.

    Pure function: nothing is stored here.

    Args:
        questions: Questions in display order
        answers: One answer per question, in the same order

    Returns:
        ScoreResult with the per-question flags and the aggregate score

    Raises:
        ValueError: if the two sequences differ in length
    """
    if len(questions) != len(answers):
        raise ValueError(f"Expected {len(questions)} answers, got {len(answers)}")

    results = [
        QuestionResult(
            question_id=question.id,
            selected_answer=answer,
            is_correct=is_answer_correct(question, answer),
        )
        for question, answer in zip(questions, answers)
    ]
    return ScoreResult(
        score=sum(1 for r in results if r.is_correct),
        total_questions=len(questions),
        results=results,
    )
