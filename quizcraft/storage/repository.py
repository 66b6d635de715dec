"""Record/retrieve operations for quizzes and attempts."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from quizcraft.errors import PermissionDeniedError, QuizNotFoundError
from quizcraft.models.quiz import (
    AnswerOption,
    Identity,
    Question,
    QuestionType,
    Quiz,
    QuizDraft,
    QuizSummary,
    utcnow,
)
from quizcraft.models.results import QuestionResponse, QuizResponse, ScoreResult
from quizcraft.storage import orm

logger = logging.getLogger(__name__)


def to_question(row: orm.Question) -> Question:
    return Question(
        id=row.id,
        text=row.question_text,
        type=QuestionType(row.question_type),
        position=row.order_index,
        reference_answer=row.reference_answer,
        options=[
            AnswerOption(id=o.id, text=o.option_text, is_correct=o.is_correct, position=o.order_index)
            for o in row.answer_options
        ],
    )


def to_quiz(row: orm.Quiz) -> Quiz:
    return Quiz(
        id=row.id,
        title=row.title,
        description=row.description,
        quiz_type=row.quiz_type,
        is_published=row.is_published,
        created_by=row.created_by,
        created_at=row.created_at,
        updated_at=row.updated_at,
        questions=[to_question(q) for q in row.questions],
    )


def to_summary(row: orm.Quiz) -> QuizSummary:
    return QuizSummary(
        id=row.id,
        title=row.title,
        description=row.description,
        quiz_type=row.quiz_type,
        is_published=row.is_published,
        created_by=row.created_by,
        created_at=row.created_at,
        updated_at=row.updated_at,
        question_count=len(row.questions),
        response_count=len(row.responses),
    )


def to_response(row: orm.QuizResponse) -> QuizResponse:
    """Answers are listed in the order their questions appear in the quiz."""
    return QuizResponse(
        id=row.id,
        quiz_id=row.quiz_id,
        user_id=row.user_id,
        score=row.score,
        total_questions=row.total_questions,
        completed_at=row.completed_at,
        question_responses=[
            QuestionResponse(
                id=qr.id,
                question_id=qr.question_id,
                selected_answer=qr.selected_answer,
                is_correct=qr.is_correct,
            )
            for qr in sorted(row.question_responses, key=lambda qr: qr.question.order_index)
        ],
    )


class QuizRepository:
    """Quiz and attempt storage backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    # Quizzes

    def create_quiz(self, draft: QuizDraft, owner: Identity) -> Quiz:
        """
        Store a new quiz with its questions and options.

        Short answer questions keep only their reference answer; any options
        on them are not stored.
        """
        now = utcnow()
        row = orm.Quiz(
            title=draft.title,
            description=draft.description,
            quiz_type=draft.quiz_type.value,
            is_published=draft.publish,
            created_by=owner.user_id,
            created_at=now,
            updated_at=now,
        )
        for i, question in enumerate(draft.questions):
            question_row = orm.Question(
                question_text=question.text,
                question_type=question.type.value,
                order_index=i,
            )
            if question.type == QuestionType.SHORT_ANSWER:
                question_row.reference_answer = question.reference_answer
            else:
                question_row.answer_options = [
                    orm.AnswerOption(option_text=o.text, is_correct=o.is_correct, order_index=j)
                    for j, o in enumerate(question.options)
                ]
            row.questions.append(question_row)

        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        logger.info("Quiz %s created by %s with %d question(s)", row.id, owner.user_id, len(draft.questions))
        return to_quiz(row)

    def _get_row(self, quiz_id: str) -> orm.Quiz:
        row = self.db.get(orm.Quiz, quiz_id)
        if row is None:
            raise QuizNotFoundError(quiz_id)
        return row

    def _get_owned_row(self, quiz_id: str, owner: Identity) -> orm.Quiz:
        row = self._get_row(quiz_id)
        if row.created_by != owner.user_id:
            logger.warning("User %s denied access to quiz %s", owner.user_id, quiz_id)
            raise PermissionDeniedError()
        return row

    def get_quiz(self, quiz_id: str) -> Quiz:
        return to_quiz(self._get_row(quiz_id))

    def get_published_quiz(self, quiz_id: str) -> Quiz:
        """Quizzes that are not published look the same as missing ones."""
        row = self._get_row(quiz_id)
        if not row.is_published:
            raise QuizNotFoundError(quiz_id)
        return to_quiz(row)

    def get_owned_quiz(self, quiz_id: str, owner: Identity) -> Quiz:
        return to_quiz(self._get_owned_row(quiz_id, owner))

    def list_published(self) -> list[QuizSummary]:
        stmt = select(orm.Quiz).where(orm.Quiz.is_published.is_(True)).order_by(orm.Quiz.created_at.desc())
        return [to_summary(row) for row in self.db.scalars(stmt)]

    def list_owned(self, owner: Identity) -> list[QuizSummary]:
        stmt = select(orm.Quiz).where(orm.Quiz.created_by == owner.user_id).order_by(orm.Quiz.updated_at.desc())
        return [to_summary(row) for row in self.db.scalars(stmt)]

    def set_published(self, quiz_id: str, owner: Identity, is_published: bool) -> QuizSummary:
        row = self._get_owned_row(quiz_id, owner)
        row.is_published = is_published
        row.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(row)
        logger.info("Quiz %s published=%s", quiz_id, is_published)
        return to_summary(row)

    def delete_quiz(self, quiz_id: str, owner: Identity) -> None:
        """Delete a quiz together with its questions, options and attempts."""
        row = self._get_owned_row(quiz_id, owner)
        self.db.delete(row)
        self.db.commit()
        logger.info("Quiz %s deleted by %s", quiz_id, owner.user_id)

    # Attempts

    def record_attempt(self, quiz: Quiz, graded: ScoreResult, identity: Identity | None) -> QuizResponse:
        """
        Store a graded attempt.

        The attempt row and each answer row are committed one by one, so a
        failure partway leaves the rows written so far in place.
        """
        row = orm.QuizResponse(
            quiz_id=quiz.id,
            user_id=identity.user_id if identity else None,
            score=graded.score,
            total_questions=graded.total_questions,
            completed_at=utcnow(),
        )
        self.db.add(row)
        self.db.commit()

        for result in graded.results:
            self.db.add(
                orm.QuestionResponse(
                    response_id=row.id,
                    question_id=result.question_id,
                    selected_answer=result.selected_answer,
                    is_correct=result.is_correct,
                )
            )
            self.db.commit()

        self.db.refresh(row)
        return to_response(row)

    def list_attempts(self, quiz_id: str, identity: Identity) -> list[QuizResponse]:
        """One user's attempts at a quiz, newest first."""
        self._get_row(quiz_id)
        stmt = (
            select(orm.QuizResponse)
            .where(orm.QuizResponse.quiz_id == quiz_id, orm.QuizResponse.user_id == identity.user_id)
            .order_by(orm.QuizResponse.completed_at.desc())
        )
        return [to_response(row) for row in self.db.scalars(stmt)]

    def list_all_attempts(self, quiz_id: str) -> list[QuizResponse]:
        """Every attempt at a quiz, newest first."""
        stmt = (
            select(orm.QuizResponse)
            .where(orm.QuizResponse.quiz_id == quiz_id)
            .order_by(orm.QuizResponse.completed_at.desc())
        )
        return [to_response(row) for row in self.db.scalars(stmt)]
