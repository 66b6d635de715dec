"""In-memory state for one person working through a quiz."""

from dataclasses import dataclass, field

from quizcraft.models.quiz import Question, Quiz
from quizcraft.models.results import ScoreResult
from quizcraft.scoring.evaluator import ensure_complete, evaluate


@dataclass
class QuizSession:
    """Current question index plus the answers given so far."""

    quiz: Quiz
    current_index: int = 0
    answers: list[str | None] = field(init=False)

    def __post_init__(self) -> None:
        self.answers = [None] * self.quiz.question_count

    @property
    def questions(self) -> list[Question]:
        return self.quiz.questions

    @property
    def current_question(self) -> Question | None:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index >= len(self.questions) - 1

    def select_answer(self, answer: str | None, index: int | None = None) -> None:
        """Record an answer for the current question (or the one at index)."""
        target = self.current_index if index is None else index
        if not 0 <= target < len(self.questions):
            raise IndexError(f"Question {target} does not exist")
        self.answers[target] = answer

    def next_question(self) -> None:
        if self.current_index < len(self.questions) - 1:
            self.current_index += 1

    def previous_question(self) -> None:
        if self.current_index > 0:
            self.current_index -= 1

    def go_to(self, index: int) -> None:
        if not 0 <= index < len(self.questions):
            raise IndexError(f"Question {index} does not exist")
        self.current_index = index

    def answered_count(self) -> int:
        return sum(1 for a in self.answers if a is not None)

    def is_complete(self) -> bool:
        return all(a is not None for a in self.answers)

    def progress(self) -> float:
        """Fraction of the quiz reached, counting the current question."""
        if not self.questions:
            return 0.0
        return (self.current_index + 1) / len(self.questions)

    def grade(self) -> ScoreResult:
        """
        Grade the session.

        Raises:
            IncompleteSubmissionError: if any question is still unanswered
        """
        ensure_complete(self.questions, self.answers)
        return evaluate(self.questions, self.answers)
