"""A small, fixed-size bag of items."""

from __future__ import annotations

from textrpg.items import Item, ItemType


class Inventory:
    """Holds up to ``capacity`` slots; non-equipment items stack by name."""

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = capacity
        self.items: list[Item] = []

    def is_full(self) -> bool:
        """True when every slot is taken."""
        return len(self.items) == self.capacity

    def add_item(self, item: Item | None, amount: int = 1) -> bool:
        """Put a copy of the item in the bag; False if it does not fit."""
        if item is None:
            return False

        if item.item_type is ItemType.EQUIP:
            if self.is_full():
                return False
            self.items.append(item.clone())
            return True

        stack = next(
            (
                held
                for held in self.items
                if held.name == item.name and not held.is_full()
            ),
            None,
        )
        if stack is not None:
            if stack.remaining < amount:
                return False
            return stack.add(amount)

        if self.is_full():
            return False
        self.items.append(item.clone())
        return True

    def remove_item(self, item_name: str, amount: int = 1) -> bool:
        """Take amount of the first item with that name; False if impossible."""
        target = next((held for held in self.items if held.name == item_name), None)
        if target is None:
            return False
        if target.count == amount:
            self.items.remove(target)
            return True
        return target.remove(amount)