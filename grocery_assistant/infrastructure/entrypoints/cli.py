"""
Command-line entry point — interactive grocery assistant.

This module is the Composition Root: it loads configuration, wires the
infrastructure adapters and hands them to the application layer.

Secrets are loaded before any adapter is constructed so LANGFUSE_* and other
keys from AWS Secrets Manager are visible to the SDKs that read them.

Run locally:
    python -m grocery_assistant.infrastructure.entrypoints.cli
or, once installed:
    grocery-assistant
"""

import asyncio
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from grocery_assistant.application.agent.graph import build_agent_graph
from grocery_assistant.application.services.conversation_session import ConversationSession
from grocery_assistant.application.services.deferred_writer import DeferredListWriter
from grocery_assistant.application.use_cases.run_agent import RunAgentUseCase
from grocery_assistant.domain.ports.observability_port import IObservabilityHandler
from grocery_assistant.domain.ports.speech_port import ISpeechOutput
from grocery_assistant.infrastructure.console.stdio_console import StdioConsole
from grocery_assistant.infrastructure.entrypoints.tool_registry import create_tools
from grocery_assistant.infrastructure.llm.bedrock_adapter import BedrockChatAdapter
from grocery_assistant.infrastructure.observability.langfuse_adapter import (
    LangfuseObservabilityHandler,
)
from grocery_assistant.infrastructure.observability.null_adapter import NullObservabilityHandler
from grocery_assistant.infrastructure.speech.polly_adapter import PollySpeechOutput, resolve_player
from grocery_assistant.infrastructure.speech.silent_adapter import SilentSpeechOutput
from grocery_assistant.infrastructure.storage.in_memory_grocery_list import (
    InMemoryGroceryListStore,
)

logger = logging.getLogger(__name__)

SPEECH_FILE = Path(__file__).resolve().parent / "speech.mp3"

_TRUTHY = {"1", "true", "yes", "on"}


def configure_logging() -> None:
    """Send log records to stderr at LOG_LEVEL (default WARNING)."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_secrets() -> None:
    """Copy the GROCERY_SECRET_ARN secret into os.environ, if one is configured."""
    secret_arn = os.environ.get("GROCERY_SECRET_ARN")
    if secret_arn:
        from grocery_assistant.infrastructure.secrets.secrets_manager_adapter import (
            SecretsManagerAdapter,
        )
        SecretsManagerAdapter().load_into_env(secret_arn)


def build_observability() -> IObservabilityHandler:
    if LangfuseObservabilityHandler.is_configured():
        return LangfuseObservabilityHandler()
    logger.info("Langfuse keys not set; tracing disabled")
    return NullObservabilityHandler()


def build_speech() -> ISpeechOutput:
    if os.environ.get("GROCERY_DISABLE_SPEECH", "").strip().lower() in _TRUTHY:
        return SilentSpeechOutput()
    return PollySpeechOutput(
        speech_file=SPEECH_FILE,
        player=resolve_player(os.environ.get("GROCERY_AUDIO_PLAYER")),
    )


async def run() -> None:
    # ---------------------------------------------------------------------------
    # Composition Root — wire all dependencies once at startup
    # ---------------------------------------------------------------------------
    store = InMemoryGroceryListStore()
    writer = DeferredListWriter(store)
    tools = create_tools(store, writer)
    graph = build_agent_graph(BedrockChatAdapter(), tools)
    observability = build_observability()
    session = ConversationSession(
        run_agent=RunAgentUseCase(graph, observability),
        console=StdioConsole(),
        speech=build_speech(),
    )

    try:
        await session.run()
    finally:
        # Let adds acknowledged in the last turn land before shutdown.
        await writer.drain()
        observability.flush()


def main() -> None:
    load_dotenv()
    configure_logging()
    load_secrets()
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
