"""
Port (interface) for grocery list storage.
Infrastructure adapters (e.g. InMemoryGroceryListStore) must implement this interface.
"""

from abc import ABC, abstractmethod

from grocery_assistant.domain.entities.grocery_list import Category, GroceryListSnapshot


class IGroceryListStore(ABC):
    @abstractmethod
    def add(self, category: Category, item: str) -> None:
        """Append the normalized form of *item* to *category*. Each call is atomic."""
        ...

    @abstractmethod
    def retrieve(self) -> GroceryListSnapshot:
        """Return a copy of both sections as they are at the time of the call."""
        ...
