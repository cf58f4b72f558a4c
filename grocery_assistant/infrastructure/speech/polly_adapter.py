"""
Infrastructure adapter: Amazon Polly + a command-line audio player → ISpeechOutput.

Each call synthesizes MP3 audio, overwrites the staging file, then plays it
with the first available player and waits for playback to finish.
Nothing here raises: every failure is logged and the call returns.
"""

import asyncio
import logging
import os
import shlex
import shutil
from pathlib import Path
from typing import Any, Optional, Sequence

import boto3

from grocery_assistant.domain.ports.speech_port import ISpeechOutput

logger = logging.getLogger(__name__)

PLAYER_CANDIDATES: tuple[tuple[str, ...], ...] = (
    ("afplay",),
    ("mpg123", "-q"),
    ("ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"),
)


def resolve_player(configured: Optional[str] = None) -> Optional[list[str]]:
    """Return the player command line (without the file argument), or None.

    *configured* (normally GROCERY_AUDIO_PLAYER) takes precedence over the
    built-in candidates.
    """
    if configured:
        return shlex.split(configured)
    for candidate in PLAYER_CANDIDATES:
        if shutil.which(candidate[0]):
            return list(candidate)
    return None


class PollySpeechOutput(ISpeechOutput):
    """Speaks text through Amazon Polly."""

    VOICE_ID = "Joanna"
    ENGINE = "neural"

    def __init__(
        self,
        speech_file: Path,
        player: Optional[Sequence[str]] = None,
        client: Any = None,
        voice_id: Optional[str] = None,
    ) -> None:
        """
        Args:
            speech_file: Staging path for the synthesized MP3; overwritten per call.
            player:      Player command without the file argument. None disables playback.
            client:      Pre-built boto3 Polly client (tests); built from env otherwise.
            voice_id:    Polly voice; defaults to POLLY_VOICE_ID or Joanna.
        """
        self._speech_file = Path(speech_file)
        self._player = list(player) if player else None
        self._client = client or boto3.client(
            "polly", region_name=os.environ.get("AWS_DEFAULT_REGION", "us-east-1")
        )
        self._voice_id = voice_id or os.environ.get("POLLY_VOICE_ID", self.VOICE_ID)

    async def speak(self, text: str) -> None:
        if not text.strip():
            return
        try:
            audio = await asyncio.to_thread(self._synthesize, text)
            await asyncio.to_thread(self._speech_file.write_bytes, audio)
        except Exception:
            logger.exception("Error generating speech")
            return
        await self._play()

    def _synthesize(self, text: str) -> bytes:
        response = self._client.synthesize_speech(
            Text=text,
            OutputFormat="mp3",
            VoiceId=self._voice_id,
            Engine=self.ENGINE,
        )
        return response["AudioStream"].read()

    async def _play(self) -> None:
        if not self._player:
            logger.warning("No audio player available; skipping playback of %s", self._speech_file)
            return
        try:
            process = await asyncio.create_subprocess_exec(
                *self._player,
                str(self._speech_file),
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
            returncode = await process.wait()
        except Exception:
            logger.exception("Error playing audio")
            return
        if returncode != 0:
            logger.warning("Audio player %s exited with status %d", self._player[0], returncode)
