"""
Application service: the read → answer → speak loop for one interactive session.

Business decisions owned here:
  - "exit" (any letter case) or end of input ends the session quietly.
  - History only grows after a turn succeeds: the human turn, then the
    assistant turn. A failed turn is reported and leaves History untouched.
  - No turn-level error ends the session.

Collaborators (RunAgentUseCase, IConsole, ISpeechOutput) are injected; no
imports from langchain, boto3 or any other external library appear here.
"""

import logging
import uuid
from typing import Optional

from grocery_assistant.application.use_cases.run_agent import RunAgentUseCase
from grocery_assistant.domain.entities.conversation import ConversationTurn, Role
from grocery_assistant.domain.ports.console_port import IConsole
from grocery_assistant.domain.ports.speech_port import ISpeechOutput

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
USER_PROMPT = "User: "


class ConversationSession:
    def __init__(
        self,
        run_agent: RunAgentUseCase,
        console: IConsole,
        speech: ISpeechOutput,
        session_id: Optional[str] = None,
    ) -> None:
        self._run_agent = run_agent
        self._console = console
        self._speech = speech
        self.session_id = session_id or uuid.uuid4().hex
        self.history: list[ConversationTurn] = []

    async def run(self) -> None:
        """Prompt for input until the user exits."""
        while True:
            user_input = await self._console.read_line(USER_PROMPT)
            if user_input is None or user_input.lower() == EXIT_COMMAND:
                return
            await self.handle_turn(user_input)

    async def handle_turn(self, user_input: str) -> bool:
        """Answer one input. Returns True if the turn succeeded."""
        try:
            answer = await self._run_agent.execute(
                user_input, history=tuple(self.history), session_id=self.session_id
            )
        except Exception as exc:
            logger.debug("Turn failed", exc_info=True)
            self._console.error(f"Error: {exc}")
            return False

        self._console.write(f"Assistant: {answer}")
        self.history.append(ConversationTurn(Role.HUMAN, user_input))
        self.history.append(ConversationTurn(Role.ASSISTANT, answer))
        await self._speech.speak(answer)
        return True
