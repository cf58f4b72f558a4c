"""
Port (interface) for line-based user interaction.
Infrastructure adapters (e.g. StdioConsole) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IConsole(ABC):
    @abstractmethod
    async def read_line(self, prompt: str) -> Optional[str]:
        """Show *prompt* and return the next line, or None at end of input."""
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Show a line of normal output."""
        ...

    @abstractmethod
    def error(self, text: str) -> None:
        """Show a line of error output."""
        ...
