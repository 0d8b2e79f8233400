"""
Meal aggregate - an ordered collection of items.
"""

import logging
from typing import Iterator, List, Tuple

from domain.models.item import Item

logger = logging.getLogger("gof.meals")


class Meal:
    """Items in insertion order; duplicates allowed, nothing is ever removed."""

    def __init__(self):
        self._items: List[Item] = []

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        logger.debug(f"Added {item.name!r} to meal ({len(self._items)} items)")

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def get_total_price(self) -> float:
        """Sum of item prices, 0.0 for an empty meal. Never cached."""
        return sum((item.price for item in self._items), 0.0)

    def item_lines(self) -> List[str]:
        return [
            f"Item: {item.name}, Packaging: {item.packaging.pack()}, Price: {item.price}"
            for item in self._items
        ]

    def show_items(self) -> None:
        for line in self.item_lines():
            print(line)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
