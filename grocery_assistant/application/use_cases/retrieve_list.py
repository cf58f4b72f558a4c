"""
Use-case: read the current grocery list.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from grocery_assistant.domain.ports.grocery_list_port import IGroceryListStore

PROCESSING_STATUS = "Some items may still be processing..."


class RetrieveListUseCase:
    def __init__(self, store: IGroceryListStore) -> None:
        self._store = store

    def execute(self) -> dict:
        """Return ``{"fruits": [...], "vegetables": [...], "status": str}``.

        Adds are applied asynchronously, so the snapshot can miss items that
        were requested moments ago. The status line tells the reader so.
        """
        payload = self._store.retrieve().as_dict()
        payload["status"] = PROCESSING_STATUS
        return payload
