"""
Domain entities for the grocery list.
Zero external dependencies — pure Python dataclasses and enums only.
"""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """The closed set of list sections an item can be filed under."""

    FRUITS = "fruits"
    VEGETABLES = "vegetables"


def normalize_item(item: str) -> str:
    """Return the canonical stored form of *item*: trimmed and lower-cased.

    Raises:
        ValueError: if *item* is blank after trimming.
    """
    normalized = item.strip().lower()
    if not normalized:
        raise ValueError("item must be a non-empty string")
    return normalized


@dataclass(frozen=True)
class GroceryListSnapshot:
    """Point-in-time copy of both list sections. Never aliases store state."""

    fruits: tuple[str, ...] = ()
    vegetables: tuple[str, ...] = ()

    def items(self, category: Category) -> tuple[str, ...]:
        return getattr(self, category.value)

    def as_dict(self) -> dict[str, list[str]]:
        return {"fruits": list(self.fruits), "vegetables": list(self.vegetables)}
