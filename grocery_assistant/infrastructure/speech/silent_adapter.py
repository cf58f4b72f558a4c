"""
Infrastructure adapter: no audio → ISpeechOutput.
Selected when GROCERY_DISABLE_SPEECH is set.
"""

import logging

from grocery_assistant.domain.ports.speech_port import ISpeechOutput

logger = logging.getLogger(__name__)


class SilentSpeechOutput(ISpeechOutput):
    async def speak(self, text: str) -> None:
        logger.debug("Speech disabled; not speaking %d characters", len(text))
