"""
Domain error types.
Zero external dependencies.

ToolExecutionError and its subclasses never escape the agent graph: the tool
node converts them into error ToolMessages so the model can retry.
IterationLimitError is a turn-level failure handled by the conversation session.
"""


class GroceryAssistantError(Exception):
    """Base class for every error raised by this package."""


class ToolExecutionError(GroceryAssistantError):
    """A requested tool call could not be executed."""

    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(f"{tool_name}: {message}")
        self.tool_name = tool_name
        self.message = message


class UnknownToolError(ToolExecutionError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(tool_name, f"unknown tool {tool_name!r}")


class ToolValidationError(ToolExecutionError):
    """Tool arguments failed the tool's declared schema."""


class IterationLimitError(GroceryAssistantError):
    def __init__(self, max_iterations: int) -> None:
        super().__init__(
            f"Agent stopped after {max_iterations} iterations without a final answer."
        )
        self.max_iterations = max_iterations
