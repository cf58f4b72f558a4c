"""
LangGraph ReAct agent graph factory.

Dependency-injection contract:
  - Receives ILanguageModel and a list of @tool-decorated callables.
  - Never imports ChatBedrock, langfuse, boto3 or any store adapter directly.
  - langchain_core and langgraph are treated as orchestration-framework imports,
    acceptable in the application layer.

One user turn runs llm_node → (tool_node → llm_node)* until the model answers
without tool calls. Every llm_node pass counts as one iteration; a pass that
would exceed max_iterations raises IterationLimitError instead of calling the model.
"""

import logging

from langchain_core.messages import SystemMessage, ToolMessage
from langgraph.graph import END, START, StateGraph

from grocery_assistant.application.agent.prompts import SYSTEM_PROMPT
from grocery_assistant.application.agent.state import AgentState
from grocery_assistant.application.agent.tool_schemas import parse_tool_call
from grocery_assistant.domain.errors import (
    IterationLimitError,
    ToolExecutionError,
    UnknownToolError,
)
from grocery_assistant.domain.ports.llm_port import ILanguageModel

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 10


def build_agent_graph(llm: ILanguageModel, tools: list, max_iterations: int = MAX_ITERATIONS):
    """Build and compile the ReAct agent graph.

    Args:
        llm:            ILanguageModel implementation — injected, no direct SDK reference.
        tools:          List of LangChain tools from tool_registry.create_tools().
        max_iterations: Reasoning steps allowed per turn before IterationLimitError.

    Returns:
        Compiled LangGraph CompiledStateGraph ready for ainvoke() calls.
    """
    tools_by_name = {t.name: t for t in tools}
    llm_with_tools = llm.bind_tools(tools)

    async def llm_node(state: AgentState) -> dict:
        """Reasoning step: prepend system prompt if absent, then call the LLM."""
        iterations = state.get("iterations", 0)
        if iterations >= max_iterations:
            raise IterationLimitError(max_iterations)

        existing = state["messages"]
        if existing and isinstance(existing[0], SystemMessage):
            messages = existing
        else:
            messages = [SystemMessage(content=SYSTEM_PROMPT)] + existing
        response = await llm_with_tools.ainvoke(messages)
        return {"messages": [response], "iterations": iterations + 1}

    async def tool_node(state: AgentState) -> dict:
        """Action step: validate and run every tool call in the last LLM message.

        Failures become error ToolMessages so the next reasoning step can see
        them and retry with corrected arguments.
        """
        last_message = state["messages"][-1]
        results: list[ToolMessage] = [
            _unparsed_call_error(call) for call in getattr(last_message, "invalid_tool_calls", None) or []
        ]
        for tool_call in last_message.tool_calls:
            call_id = tool_call.get("id") or ""
            try:
                invocation = parse_tool_call(tool_call)
                tool = tools_by_name.get(invocation.kind.value)
                if tool is None:
                    raise UnknownToolError(invocation.kind.value)
                output = await tool.ainvoke(
                    invocation.args.model_dump(mode="json", exclude_none=True)
                )
            except ToolExecutionError as exc:
                logger.info("Rejected tool call: %s", exc)
                results.append(
                    ToolMessage(content=f"Error: {exc}", tool_call_id=call_id, status="error")
                )
                continue
            except Exception as exc:
                logger.warning("Tool %s failed: %s", tool_call.get("name"), exc)
                results.append(
                    ToolMessage(
                        content=f"Error: {tool_call.get('name')}: {exc}",
                        tool_call_id=call_id,
                        status="error",
                    )
                )
                continue
            results.append(ToolMessage(content=str(output), tool_call_id=call_id))
        return {"messages": results}

    def should_continue(state: AgentState) -> str:
        """Route: if the LLM made tool calls (parsed or not), execute them; otherwise end."""
        last_message = state["messages"][-1]
        if getattr(last_message, "tool_calls", None) or getattr(last_message, "invalid_tool_calls", None):
            return "tool_node"
        return END

    workflow = StateGraph(AgentState)
    workflow.add_node("llm_node", llm_node)
    workflow.add_node("tool_node", tool_node)
    workflow.add_edge(START, "llm_node")
    workflow.add_conditional_edges("llm_node", should_continue, ["tool_node", END])
    workflow.add_edge("tool_node", "llm_node")
    return workflow.compile()


def _unparsed_call_error(invalid_call: dict) -> ToolMessage:
    """Report a tool call whose arguments the provider could not decode."""
    name = invalid_call.get("name") or "unknown tool"
    detail = invalid_call.get("error") or f"arguments are not valid JSON: {invalid_call.get('args')!r}"
    return ToolMessage(
        content=f"Error: {name}: {detail}",
        tool_call_id=invalid_call.get("id") or "",
        status="error",
    )
