"""
Use-case: answer one user turn through the compiled LangGraph ReAct agent.
langchain_core.messages is treated as framework (not infrastructure) because
LangGraph is the orchestration framework used throughout the application layer.
"""

from typing import Any, Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langgraph.errors import GraphRecursionError

from grocery_assistant.application.agent.graph import MAX_ITERATIONS
from grocery_assistant.domain.entities.conversation import ConversationTurn, Role
from grocery_assistant.domain.errors import IterationLimitError
from grocery_assistant.domain.ports.observability_port import IObservabilityHandler

APP_VERSION = "1.0.0"


class RunAgentUseCase:
    def __init__(
        self,
        graph: Any,
        observability: IObservabilityHandler,
        max_iterations: int = MAX_ITERATIONS,
        environment: str = "development",
    ) -> None:
        """
        Args:
            graph:          Compiled LangGraph StateGraph returned by build_agent_graph().
            observability:  IObservabilityHandler implementation (e.g. Langfuse adapter).
            max_iterations: Must match the value the graph was built with; used
                            to size the LangGraph recursion limit.
            environment:    Reported in trace metadata.
        """
        self._graph = graph
        self._observability = observability
        self._max_iterations = max_iterations
        self._environment = environment

    async def execute(
        self,
        user_input: str,
        history: Sequence[ConversationTurn] = (),
        session_id: Optional[str] = None,
    ) -> str:
        """Run one turn and return the assistant's final answer.

        The agent keeps no memory between calls; *history* is the only context
        carried over from previous turns.

        Raises:
            IterationLimitError: if the agent keeps calling tools past the ceiling.
            Any exception raised by the language model provider.
        """
        callback = self._observability.as_callback()
        config = {
            "callbacks": [callback] if callback is not None else [],
            "tags": ["grocery"],
            "metadata": {
                "app_version": APP_VERSION,
                "environment": self._environment,
                "langfuse_session_id": session_id,
                "langfuse_tags": ["grocery"],
            },
            # llm_node enforces the ceiling; this only backstops the graph runtime.
            "recursion_limit": 2 * self._max_iterations + 2,
        }
        messages = [_to_message(turn) for turn in history]
        messages.append(HumanMessage(content=user_input))
        try:
            final_state = await self._graph.ainvoke(
                {"messages": messages, "iterations": 0},
                config=config,
            )
        except GraphRecursionError as exc:
            raise IterationLimitError(self._max_iterations) from exc
        return _message_text(final_state["messages"][-1])


def _to_message(turn: ConversationTurn) -> BaseMessage:
    if turn.role == Role.HUMAN:
        return HumanMessage(content=turn.content)
    return AIMessage(content=turn.content)


def _message_text(message: BaseMessage) -> str:
    """Flatten string or content-block message content into plain text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
