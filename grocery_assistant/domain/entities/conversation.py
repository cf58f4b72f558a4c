"""
Domain entities for chat history.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    HUMAN = "human"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    role: Role
    content: str
