"""
Infrastructure adapter: stdin/stdout/stderr → IConsole.

input() blocks, so each read runs on its own daemon thread and hands the line
back to the event loop. A read abandoned by Ctrl-C leaves only a daemon thread
behind, which does not hold up interpreter shutdown.
"""

import asyncio
import contextlib
import sys
import threading
from typing import Optional

from grocery_assistant.domain.ports.console_port import IConsole


class StdioConsole(IConsole):
    async def read_line(self, prompt: str) -> Optional[str]:
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        threading.Thread(
            target=self._read, args=(loop, future, prompt), name="stdin-reader", daemon=True
        ).start()
        return await future

    def write(self, text: str) -> None:
        print(text, flush=True)

    def error(self, text: str) -> None:
        print(text, file=sys.stderr, flush=True)

    @staticmethod
    def _read(loop: asyncio.AbstractEventLoop, future: asyncio.Future, prompt: str) -> None:
        try:
            line: Optional[str] = input(prompt)
        except EOFError:
            line = None
        except Exception as exc:
            with contextlib.suppress(RuntimeError):
                loop.call_soon_threadsafe(_settle, future, None, exc)
            return
        # The loop is closed if the session ended while this thread was blocked.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_settle, future, line, None)


def _settle(future: asyncio.Future, line: Optional[str], exc: Optional[BaseException]) -> None:
    if future.done():
        return
    if exc is not None:
        future.set_exception(exc)
    else:
        future.set_result(line)
