"""
Infrastructure adapter: Langfuse tracing of grocery turns → IObservabilityHandler.

Only built by the CLI when both LANGFUSE_* keys are set (see is_configured);
otherwise NullObservabilityHandler is used and no langfuse code is imported.
"""

import os
from typing import Any

from grocery_assistant.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    def __init__(self) -> None:
        from langfuse.langchain import CallbackHandler
        self._handler = CallbackHandler()

    @staticmethod
    def is_configured() -> bool:
        return bool(os.environ.get("LANGFUSE_PUBLIC_KEY") and os.environ.get("LANGFUSE_SECRET_KEY"))

    def as_callback(self) -> Any:
        return self._handler

    def flush(self) -> None:
        """Push buffered traces when the user exits the session."""
        from langfuse import get_client
        get_client().flush()
