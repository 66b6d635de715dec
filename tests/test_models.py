"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from quizcraft.models.quiz import (
    AnswerOption,
    GeneratedAnswer,
    GeneratedQuestion,
    GenerationRequest,
    Identity,
    Question,
    QuestionDifficulty,
    QuestionType,
    Quiz,
    QuizDraft,
)
from quizcraft.models.results import ScoreResult


class TestQuestion:
    """Test Question model validation."""

    def test_valid_multiple_choice(self, sample_question: Question):
        """Test that a valid multiple choice question is created."""
        assert sample_question.text == "What is the capital of France?"
        assert len(sample_question.options) == 4
        assert sample_question.correct_option.text == "Paris"

    def test_rejects_two_correct_options(self):
        """Test that multiple choice allows at most one correct option."""
        with pytest.raises(ValidationError, match="at most one correct"):
            Question(
                text="Pick one",
                type=QuestionType.MULTIPLE_CHOICE,
                options=[
                    AnswerOption(text="A", is_correct=True),
                    AnswerOption(text="B", is_correct=True),
                ],
            )

    def test_multiple_choice_without_correct_option_is_allowed(self):
        """Test that a draft may have no correct option yet."""
        question = Question(
            text="Pick one",
            options=[AnswerOption(text="A"), AnswerOption(text="B")],
        )

        assert question.correct_option is None

    def test_true_false_requires_fixed_pair(self):
        """Test that true/false options must be exactly True and False."""
        with pytest.raises(ValidationError, match="True"):
            Question(
                text="The sky is blue.",
                type=QuestionType.TRUE_FALSE,
                options=[AnswerOption(text="Yes", is_correct=True), AnswerOption(text="No")],
            )

    def test_short_answer_rejects_options(self):
        """Test that short answer questions cannot carry options."""
        with pytest.raises(ValidationError, match="Short answer"):
            Question(
                text="Explain gravity.",
                type=QuestionType.SHORT_ANSWER,
                options=[AnswerOption(text="Mass attracts mass", is_correct=True)],
            )

    def test_empty_text_fails(self):
        """Test that empty question text fails validation."""
        with pytest.raises(ValidationError):
            Question(text="", type=QuestionType.SHORT_ANSWER)

    def test_option_accepts_camel_case_alias(self):
        """Test that isCorrect is accepted as the field alias."""
        option = AnswerOption.model_validate({"text": "Paris", "isCorrect": True})

        assert option.is_correct is True


class TestQuiz:
    """Test Quiz model."""

    def test_questions_sorted_by_position(self, sample_questions: list[Question]):
        """Test that questions are kept in display order."""
        quiz = Quiz(title="Quiz", created_by="owner-1", questions=list(reversed(sample_questions)))

        assert [q.position for q in quiz.questions] == [0, 1, 2]

    def test_question_count(self, sample_quiz: Quiz):
        """Test the question_count property."""
        assert sample_quiz.question_count == 3

    def test_draft_title_is_stripped(self):
        """Test that draft titles are cleaned."""
        draft = QuizDraft(title="  History  ")

        assert draft.title == "History"

    def test_blank_draft_title_fails(self):
        """Test that a whitespace-only title fails validation."""
        with pytest.raises(ValidationError):
            QuizDraft(title="   ")


class TestGenerationRequest:
    """Test GenerationRequest model validation."""

    def test_accepts_camel_case_payload(self):
        """Test that the wire field names are accepted."""
        request = GenerationRequest.model_validate(
            {
                "topic": "Rome",
                "difficulty": "easy",
                "questionCount": 2,
                "questionTypes": ["true_false"],
            }
        )

        assert request.question_count == 2
        assert request.question_types == [QuestionType.TRUE_FALSE]
        assert request.difficulty == QuestionDifficulty.EASY

    def test_difficulty_defaults_to_medium(self):
        """Test the default difficulty."""
        request = GenerationRequest(topic="Rome", question_count=1, question_types=[QuestionType.SHORT_ANSWER])

        assert request.difficulty == QuestionDifficulty.MEDIUM

    def test_topic_is_stripped(self):
        """Test that topic whitespace is removed."""
        request = GenerationRequest(topic="  Rome ", question_count=1, question_types=["true_false"])

        assert request.topic == "Rome"

    def test_zero_count_fails(self):
        """Test that question_count must be at least 1."""
        with pytest.raises(ValidationError):
            GenerationRequest(topic="Rome", question_count=0, question_types=["true_false"])

    def test_empty_types_fail(self):
        """Test that at least one question type is required."""
        with pytest.raises(ValidationError):
            GenerationRequest(topic="Rome", question_count=1, question_types=[])

    def test_unknown_type_fails(self):
        """Test that unsupported question types are rejected."""
        with pytest.raises(ValidationError):
            GenerationRequest(topic="Rome", question_count=1, question_types=["essay"])

    def test_duplicate_types_removed(self):
        """Test that repeated types are collapsed in order."""
        request = GenerationRequest(
            topic="Rome",
            question_count=1,
            question_types=["true_false", "multiple_choice", "true_false"],
        )

        assert request.question_types == [QuestionType.TRUE_FALSE, QuestionType.MULTIPLE_CHOICE]


class TestGeneratedQuestion:
    """Test GeneratedQuestion validation and conversion."""

    def test_to_question_keeps_option_order(self):
        """Test conversion of a multiple choice suggestion."""
        generated = GeneratedQuestion(
            text="2 + 2?",
            type=QuestionType.MULTIPLE_CHOICE,
            answers=[GeneratedAnswer(text="3", is_correct=False), GeneratedAnswer(text="4", is_correct=True)],
        )

        question = generated.to_question(position=5)

        assert question.position == 5
        assert [o.text for o in question.options] == ["3", "4"]
        assert [o.position for o in question.options] == [0, 1]
        assert question.correct_option.text == "4"

    def test_short_answer_keeps_reference_answer(self):
        """Test that the expected answer becomes the reference answer."""
        generated = GeneratedQuestion.model_validate(
            {
                "text": "Who wrote 1984?",
                "type": "short_answer",
                "answers": [{"text": "George Orwell", "isCorrect": True}],
            }
        )

        question = generated.to_question()

        assert question.options == []
        assert question.reference_answer == "George Orwell"

    def test_missing_answers_fails(self):
        """Test that the answers array is required."""
        with pytest.raises(ValidationError):
            GeneratedQuestion.model_validate({"text": "Q?", "type": "multiple_choice"})

    def test_true_false_with_wrong_texts_fails(self):
        """Test that generated true/false answers must be True and False."""
        with pytest.raises(ValidationError):
            GeneratedQuestion.model_validate(
                {
                    "text": "Water is wet.",
                    "type": "true_false",
                    "answers": [{"text": "Yes", "isCorrect": True}, {"text": "No", "isCorrect": False}],
                }
            )


class TestMisc:
    """Test small value models."""

    def test_identity_is_frozen(self):
        """Test that identities cannot be mutated."""
        identity = Identity(user_id="u1")

        with pytest.raises(ValidationError):
            identity.user_id = "u2"

    def test_percentage_rounds(self):
        """Test ScoreResult percentage."""
        assert ScoreResult(score=2, total_questions=3).percentage == 67

    def test_percentage_of_empty_quiz(self):
        """Test that an empty quiz scores 0 percent."""
        assert ScoreResult(score=0, total_questions=0).percentage == 0
