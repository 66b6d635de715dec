"""LangGraph workflow definition for question generation."""

from langchain_core.language_models.chat_models import BaseChatModel
from langgraph.graph import END, StateGraph

from quizcraft.agents.generator import make_generator_node
from quizcraft.agents.parser import parse_response
from quizcraft.agents.planner import plan_prompt
from quizcraft.graph.state import GenerationState


def create_generation_workflow(llm: BaseChatModel) -> StateGraph:
    """
    Create the LangGraph workflow for question generation.

    The workflow is a straight line with no feedback loop:
    1. Planner - Builds the prompt from the request
    2. Generator - Makes exactly one model call
    3. Parser - Strips fences, parses and validates the reply

    An exception in any node aborts the run.

    Args:
        llm: Chat model the generator node calls

    Returns:
        Uncompiled StateGraph
    """
    workflow = StateGraph(GenerationState)

    workflow.add_node("planner", plan_prompt)
    workflow.add_node("generator", make_generator_node(llm))
    workflow.add_node("parser", parse_response)

    workflow.set_entry_point("planner")
    workflow.add_edge("planner", "generator")
    workflow.add_edge("generator", "parser")
    workflow.add_edge("parser", END)

    return workflow


def compile_workflow(llm: BaseChatModel):
    """
    Compile the workflow and return it ready for execution.

    Args:
        llm: Chat model the generator node calls

    Returns:
        Compiled workflow
    """
    return create_generation_workflow(llm).compile()
