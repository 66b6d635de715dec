"""Format Coordinator Agent - Merges generated questions into an editable draft."""

from collections.abc import Sequence

from quizcraft.models.quiz import (
    TRUE_FALSE_OPTIONS,
    AnswerOption,
    GeneratedQuestion,
    Question,
    QuestionType,
    QuizDraft,
)


def renumber_questions(questions: Sequence[Question]) -> list[Question]:
    """
    Reassign positions so they follow list order.

    Args:
        questions: Questions in the desired display order

    Returns:
        New question objects with positions 0..n-1
    """
    return [q.model_copy(update={"position": i}) for i, q in enumerate(questions)]


def merge_generated_questions(
    existing: Sequence[Question], generated: Sequence[GeneratedQuestion]
) -> list[Question]:
    """
    Append accepted suggestions after the questions already in the draft.

    Args:
        existing: Questions already in the draft
        generated: Suggestions the author accepted

    Returns:
        Combined, renumbered question list
    """
    merged = list(existing)
    merged.extend(gq.to_question() for gq in generated)
    return renumber_questions(merged)


def default_options_for(question_type: QuestionType) -> list[AnswerOption]:
    """Blank option set an editor starts from for each question type."""
    if question_type == QuestionType.TRUE_FALSE:
        return [
            AnswerOption(text=text, is_correct=False, position=i)
            for i, text in enumerate(TRUE_FALSE_OPTIONS)
        ]
    if question_type == QuestionType.MULTIPLE_CHOICE:
        return [
            AnswerOption(text="", is_correct=False, position=0),
            AnswerOption(text="", is_correct=False, position=1),
        ]
    return []


def change_question_type(question: Question, question_type: QuestionType) -> Question:
    """
    Switch a question to another type, resetting its options.

    Args:
        question: Question being edited
        question_type: New type

    Returns:
        A new question with the default options for the new type
    """
    return Question(
        id=question.id,
        text=question.text,
        type=question_type,
        position=question.position,
        options=default_options_for(question_type),
    )


def mark_correct_option(question: Question, option_index: int) -> Question:
    """
    Flag one option as correct.

    Multiple choice and true/false questions keep a single correct option,
    so the other flags are cleared.

    Args:
        question: Question being edited
        option_index: Index into question.options

    Returns:
        A new question with updated flags

    Raises:
        IndexError: if option_index is out of range
        ValueError: for short answer questions, which have no options
    """
    if question.type == QuestionType.SHORT_ANSWER:
        raise ValueError("Short answer questions do not have answer options")
    if not 0 <= option_index < len(question.options):
        raise IndexError(f"Option {option_index} does not exist")

    options = [
        option.model_copy(update={"is_correct": i == option_index})
        for i, option in enumerate(question.options)
    ]
    return Question(
        id=question.id,
        text=question.text,
        type=question.type,
        position=question.position,
        options=options,
    )


def build_draft(
    title: str,
    generated: Sequence[GeneratedQuestion],
    description: str | None = None,
    publish: bool = False,
) -> QuizDraft:
    """
    Create a draft quiz from a batch of generated questions.

    The quiz type is the single question type when the batch has one,
    otherwise "mixed".
    """
    questions = merge_generated_questions([], generated)
    types = {q.type for q in questions}
    quiz_type = types.pop().value if len(types) == 1 else "mixed"
    return QuizDraft(
        title=title,
        description=description,
        quiz_type=quiz_type,
        questions=questions,
        publish=publish,
    )
