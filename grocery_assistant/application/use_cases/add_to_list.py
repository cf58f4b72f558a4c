"""
Use-case: request that an item be added to the grocery list.
Depends only on Domain entities and the DeferredListWriter service.
"""

from grocery_assistant.application.services.deferred_writer import DeferredListWriter
from grocery_assistant.domain.entities.grocery_list import Category


class AddToListUseCase:
    def __init__(self, writer: DeferredListWriter) -> None:
        self._writer = writer

    def execute(self, category: Category, item: str) -> str:
        """Schedule the add and return an acknowledgment immediately.

        The acknowledgment only says the add has started. The write itself is
        best effort: it may land after this call returns, and if it fails the
        failure is logged and never reported back.
        """
        category = Category(category)
        self._writer.schedule_add(category, item)
        return f"Started adding {item} to {category.value} list..."
