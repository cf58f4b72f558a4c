"""
LangGraph agent state definition.
langgraph is the orchestration framework and is allowed in the application layer.
"""

from typing import Annotated, TypedDict

from langgraph.graph.message import add_messages


class AgentState(TypedDict):
    """Shared state threaded through every node in the ReAct graph.

    messages:   append-only list of LangChain BaseMessage objects managed by
                the add_messages reducer. Holds the chat history, the current
                user input and this turn's tool-call scratchpad.
    iterations: number of reasoning steps taken in the current turn.
    """

    messages: Annotated[list, add_messages]
    iterations: int
