"""AI agents for question generation and draft assembly."""

from .coordinator import change_question_type, mark_correct_option, merge_generated_questions
from .generator import request_questions
from .parser import parse_generated_questions, strip_code_fences
from .planner import build_generation_prompt, plan_prompt

__all__ = [
    "build_generation_prompt",
    "plan_prompt",
    "request_questions",
    "parse_generated_questions",
    "strip_code_fences",
    "merge_generated_questions",
    "change_question_type",
    "mark_correct_option",
]
