"""
Infrastructure adapter: Amazon Bedrock chat model → ILanguageModel.

The grocery agent only needs tool binding and async calls; the model id comes
from BEDROCK_MODEL_ID so a different Bedrock model can be tried without code
changes. Replies are capped at MAX_TOKENS, which is plenty for a spoken answer.
"""

import os
from typing import Any

from langchain_aws import ChatBedrock

from grocery_assistant.domain.ports.llm_port import ILanguageModel


class BedrockChatAdapter(ILanguageModel):
    MODEL_ID = "us.amazon.nova-lite-v1:0"
    MAX_TOKENS = 2048

    def __init__(self, _runnable: Any = None) -> None:
        # _runnable is the tool-bound model handed over by bind_tools().
        self._llm = _runnable if _runnable is not None else ChatBedrock(
            model=os.environ.get("BEDROCK_MODEL_ID", self.MODEL_ID),
            model_kwargs={"temperature": 0.0},
            max_tokens=self.MAX_TOKENS,
            region_name=os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def invoke(self, messages: list[Any]) -> Any:
        return self._llm.invoke(messages)

    async def ainvoke(self, messages: list[Any]) -> Any:
        return await self._llm.ainvoke(messages)

    def bind_tools(self, tools: list) -> "BedrockChatAdapter":
        """Advertise add_to_list/retrieve_list to the model; returns a new adapter."""
        return BedrockChatAdapter(_runnable=self._llm.bind_tools(tools))
