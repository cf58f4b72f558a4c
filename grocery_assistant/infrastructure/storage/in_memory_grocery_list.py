"""
Infrastructure adapter: process memory → IGroceryListStore.

The list lives only as long as the process; nothing is persisted.
A threading.Lock serialises add/retrieve so each append is atomic even if a
caller reaches the store from a worker thread (LangChain runs synchronous
callables through an executor).
"""

import threading

from grocery_assistant.domain.entities.grocery_list import (
    Category,
    GroceryListSnapshot,
    normalize_item,
)
from grocery_assistant.domain.ports.grocery_list_port import IGroceryListStore


class InMemoryGroceryListStore(IGroceryListStore):
    """Append-only fruits/vegetables lists held in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[Category, list[str]] = {category: [] for category in Category}

    def add(self, category: Category, item: str) -> None:
        """Append *item* (normalized) to *category*.

        Raises:
            ValueError: if *category* is not a known Category or *item* is blank.
        """
        category = Category(category)
        normalized = normalize_item(item)
        with self._lock:
            self._items[category].append(normalized)

    def retrieve(self) -> GroceryListSnapshot:
        with self._lock:
            return GroceryListSnapshot(
                fruits=tuple(self._items[Category.FRUITS]),
                vegetables=tuple(self._items[Category.VEGETABLES]),
            )
