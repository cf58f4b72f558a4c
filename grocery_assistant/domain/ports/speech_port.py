"""
Port (interface) for spoken output.
Infrastructure adapters (e.g. PollySpeechOutput) must implement this interface.
"""

from abc import ABC, abstractmethod


class ISpeechOutput(ABC):
    @abstractmethod
    async def speak(self, text: str) -> None:
        """Synthesize *text* and play it back, returning once playback ends.

        Implementations must never raise: failures are logged and swallowed so
        a broken speaker cannot fail a conversation turn.
        """
        ...
