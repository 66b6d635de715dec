"""Tests for the Format Coordinator Agent."""

import pytest

from quizcraft.agents.coordinator import (
    build_draft,
    change_question_type,
    mark_correct_option,
    merge_generated_questions,
    renumber_questions,
)
from quizcraft.agents.parser import parse_generated_questions
from quizcraft.models.quiz import AnswerOption, Question, QuestionType, QuizType


class TestMergeGeneratedQuestions:
    """Test appending suggestions to a draft."""

    def test_appends_after_existing(self, sample_questions: list[Question], generated_json: str):
        """Test that suggestions go after existing questions."""
        generated = parse_generated_questions(generated_json)

        merged = merge_generated_questions(sample_questions, generated)

        assert len(merged) == 5
        assert merged[3].text == generated[0].text
        assert [q.position for q in merged] == [0, 1, 2, 3, 4]

    def test_renumber_questions(self, sample_questions: list[Question]):
        """Test that positions follow list order."""
        renumbered = renumber_questions(list(reversed(sample_questions)))

        assert renumbered[0].text == sample_questions[2].text
        assert [q.position for q in renumbered] == [0, 1, 2]


class TestChangeQuestionType:
    """Test switching question types."""

    def test_to_true_false_sets_fixed_pair(self, sample_question: Question):
        """Test that True/False options are created."""
        changed = change_question_type(sample_question, QuestionType.TRUE_FALSE)

        assert [o.text for o in changed.options] == ["True", "False"]
        assert not any(o.is_correct for o in changed.options)

    def test_to_multiple_choice_gives_two_blank_options(self, sample_questions: list[Question]):
        """Test the multiple choice starting point."""
        changed = change_question_type(sample_questions[2], QuestionType.MULTIPLE_CHOICE)

        assert [o.text for o in changed.options] == ["", ""]

    def test_to_short_answer_clears_options(self, sample_question: Question):
        """Test that short answer has no options."""
        changed = change_question_type(sample_question, QuestionType.SHORT_ANSWER)

        assert changed.options == []
        assert changed.text == sample_question.text


class TestMarkCorrectOption:
    """Test flagging the correct option."""

    def test_clears_other_flags(self, sample_question: Question):
        """Test that only the chosen option stays correct."""
        updated = mark_correct_option(sample_question, 0)

        assert [o.is_correct for o in updated.options] == [True, False, False, False]
        assert sample_question.correct_option.text == "Paris"

    def test_out_of_range(self, sample_question: Question):
        """Test that an invalid index raises IndexError."""
        with pytest.raises(IndexError):
            mark_correct_option(sample_question, 9)

    def test_short_answer_has_no_options(self, sample_questions: list[Question]):
        """Test that short answer questions are rejected."""
        with pytest.raises(ValueError):
            mark_correct_option(sample_questions[2], 0)


class TestBuildDraft:
    """Test drafting a quiz from generated questions."""

    def test_single_type_sets_quiz_type(self, generated_json: str):
        """Test that a uniform batch takes its type."""
        draft = build_draft("Rome", parse_generated_questions(generated_json))

        assert draft.quiz_type == QuizType.TRUE_FALSE
        assert len(draft.questions) == 2
        assert draft.publish is False

    def test_mixed_types(self, generated_json: str):
        """Test that several types make a mixed quiz."""
        generated = parse_generated_questions(generated_json)
        generated.append(
            parse_generated_questions(
                '[{"text": "Name a Roman emperor.", "type": "short_answer", '
                '"answers": [{"text": "Augustus", "isCorrect": true}]}]'
            )[0]
        )

        draft = build_draft("Rome", generated, description="Mixed", publish=True)

        assert draft.quiz_type == QuizType.MIXED
        assert draft.questions[2].reference_answer == "Augustus"
        assert draft.publish is True
