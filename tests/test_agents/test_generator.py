"""Tests for the Question Generator Agent."""

import pytest
from langchain_core.messages import AIMessage

from quizcraft.agents.generator import extract_text, make_generator_node, request_questions
from quizcraft.agents.planner import build_generation_prompt
from quizcraft.errors import GenerationError
from quizcraft.graph.state import create_initial_state
from quizcraft.models.quiz import GenerationRequest


@pytest.fixture
def planned_state(sample_generation_request: GenerationRequest) -> dict:
    state = create_initial_state(sample_generation_request)
    state["prompt"] = build_generation_prompt(sample_generation_request)
    return state


class TestExtractText:
    """Test reading text from chat replies."""

    def test_string_content(self):
        """Test plain string content."""
        assert extract_text(AIMessage(content="hello")) == "hello"

    def test_content_blocks(self):
        """Test that text blocks are joined and other blocks skipped."""
        message = AIMessage(
            content=[
                {"type": "text", "text": "[1,"},
                {"type": "image_url", "image_url": {"url": "https://example.com/a.png"}},
                {"type": "text", "text": " 2]"},
            ]
        )

        assert extract_text(message) == "[1, 2]"


class TestRequestQuestions:
    """Test the single model call."""

    def test_returns_raw_text(self, planned_state: dict, make_fake_llm):
        """Test that the reply text is stored unchanged."""
        llm = make_fake_llm("[]")

        result = request_questions(planned_state, llm)

        assert result == {"raw_text": "[]"}

    def test_empty_reply_fails(self, planned_state: dict, make_fake_llm):
        """Test that an empty reply raises GenerationError."""
        llm = make_fake_llm("   ")

        with pytest.raises(GenerationError):
            request_questions(planned_state, llm)

    def test_node_binds_model(self, planned_state: dict, make_fake_llm):
        """Test that the node closure calls the bound model."""
        node = make_generator_node(make_fake_llm("reply"))

        assert node(planned_state) == {"raw_text": "reply"}
