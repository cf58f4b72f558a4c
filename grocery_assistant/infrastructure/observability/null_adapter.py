"""
Infrastructure adapter: tracing disabled → IObservabilityHandler.
Used when no Langfuse credentials are configured, and in tests.
"""

from grocery_assistant.domain.ports.observability_port import IObservabilityHandler


class NullObservabilityHandler(IObservabilityHandler):
    def as_callback(self) -> None:
        return None

    def flush(self) -> None:
        pass
