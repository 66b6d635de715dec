"""LangGraph workflow and state management."""

# Note: Avoid importing workflow here to prevent circular imports
# Import directly from modules as needed:
# from quizcraft.graph.state import GenerationState, create_initial_state
# from quizcraft.graph.workflow import compile_workflow, create_generation_workflow

__all__ = [
    "GenerationState",
    "create_initial_state",
    "compile_workflow",
    "create_generation_workflow",
]
