"""
Application service: fire-and-forget writes to the grocery list.

Business decisions owned here:
  - An add is acknowledged before it lands. The mutation runs as an asyncio
    task scheduled with zero delay and is never awaited by the caller.
  - Best effort: a failing mutation is logged and dropped. Callers get no
    completion or failure signal, so an acknowledgment is not a confirmation.
  - drain() exists so tests can wait for every scheduled write to settle.
"""

import asyncio
import logging

from grocery_assistant.domain.entities.grocery_list import Category
from grocery_assistant.domain.ports.grocery_list_port import IGroceryListStore

logger = logging.getLogger(__name__)


class DeferredListWriter:
    def __init__(self, store: IGroceryListStore) -> None:
        self._store = store
        self._pending: set[asyncio.Task] = set()
        self._scheduled = 0

    @property
    def pending_count(self) -> int:
        """Number of scheduled writes that have not finished yet."""
        return len(self._pending)

    @property
    def scheduled_count(self) -> int:
        """Total number of writes scheduled since construction."""
        return self._scheduled

    def schedule_add(self, category: Category, item: str) -> None:
        """Schedule ``store.add(category, item)`` on the running event loop.

        Must be called from a coroutine (or a callback) running on the loop.
        Returns immediately; the write happens after the current synchronous
        work yields control.
        """
        task = asyncio.get_running_loop().create_task(self._apply(category, item))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        self._scheduled += 1

    async def drain(self) -> None:
        """Wait until every write scheduled so far has completed or failed."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _apply(self, category: Category, item: str) -> None:
        await asyncio.sleep(0)
        try:
            self._store.add(category, item)
        except Exception:
            logger.exception("Deferred add of %r to %s failed", item, category)
