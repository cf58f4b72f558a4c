"""Unit tests for the interactive conversation loop."""

from unittest.mock import AsyncMock

import pytest

from grocery_assistant.application.services.conversation_session import (
    ConversationSession,
    USER_PROMPT,
)
from grocery_assistant.domain.entities.conversation import ConversationTurn, Role
from tests.unit.mocks import RecordingSpeech, ScriptedConsole


def _session(lines, answers):
    run_agent = AsyncMock()
    run_agent.execute.side_effect = answers
    console = ScriptedConsole(lines)
    speech = RecordingSpeech()
    return ConversationSession(run_agent, console, speech, session_id="s-1"), run_agent, console, speech


@pytest.mark.unit
class TestConversationSession:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("command", ["exit", "EXIT", "Exit", "eXiT"])
    async def test_exit_in_any_case_ends_without_further_prompts(self, command):
        session, run_agent, console, speech = _session([command, "should not be read"], [])

        await session.run()

        assert console.prompts == [USER_PROMPT]
        run_agent.execute.assert_not_called()
        assert console.output == []
        assert speech.spoken == []

    @pytest.mark.asyncio
    async def test_end_of_input_ends_session(self):
        session, run_agent, console, _ = _session([], [])

        await session.run()

        assert console.prompts == [USER_PROMPT]
        run_agent.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_successful_turn_prints_records_and_speaks(self):
        session, run_agent, console, speech = _session(
            ["Add apples to my list", "exit"], ["Added apples to your fruits list."]
        )

        await session.run()

        assert console.output == ["Assistant: Added apples to your fruits list."]
        assert session.history == [
            ConversationTurn(Role.HUMAN, "Add apples to my list"),
            ConversationTurn(Role.ASSISTANT, "Added apples to your fruits list."),
        ]
        assert speech.spoken == ["Added apples to your fruits list."]
        run_agent.execute.assert_awaited_once_with(
            "Add apples to my list", history=(), session_id="s-1"
        )

    @pytest.mark.asyncio
    async def test_history_is_passed_to_following_turns(self):
        session, run_agent, _, _ = _session(["Add kale", "Show list", "exit"], ["Added kale.", "Kale."])

        await session.run()

        second_call = run_agent.execute.await_args_list[1]
        assert second_call.kwargs["history"] == (
            ConversationTurn(Role.HUMAN, "Add kale"),
            ConversationTurn(Role.ASSISTANT, "Added kale."),
        )

    @pytest.mark.asyncio
    async def test_failed_turn_leaves_history_and_session_continues(self):
        session, run_agent, console, speech = _session(
            ["Add apples", "Add pears", "exit"],
            [RuntimeError("provider down"), "Added pears."],
        )

        await session.run()

        assert console.errors == ["Error: provider down"]
        assert console.output == ["Assistant: Added pears."]
        assert len(session.history) == 2
        assert session.history[0] == ConversationTurn(Role.HUMAN, "Add pears")
        assert speech.spoken == ["Added pears."]
        assert len(console.prompts) == 3

    @pytest.mark.asyncio
    async def test_handle_turn_reports_success(self):
        session, _, _, _ = _session([], [ValueError("bad"), "ok"])

        assert await session.handle_turn("first") is False
        assert session.history == []
        assert await session.handle_turn("second") is True
        assert len(session.history) == 2

    def test_session_id_is_generated_when_missing(self):
        session = ConversationSession(AsyncMock(), ScriptedConsole([]), RecordingSpeech())
        assert session.session_id
