"""ShoppingListItem: name, quantity and priority of something to buy.

Two items are the same item when their names match ignoring case.
"""
from typing import Optional

from pantrypal.utilities.constants import PRIORITIES, DEFAULT_PRIORITY


def normalize_priority(priority: Optional[str]) -> str:
    if priority is None or not priority.strip():
        return DEFAULT_PRIORITY
    value = priority.strip().capitalize()
    if value not in PRIORITIES:
        raise ValueError(f"Priority must be one of {', '.join(PRIORITIES)}: {priority!r}")
    return value


class ShoppingListItem:
    def __init__(self, item_name: str, quantity: int = 1, priority: Optional[str] = None):
        self.item_name = item_name
        self.quantity = quantity if quantity > 0 else 1
        self.priority = normalize_priority(priority)

    def update_quantity(self, delta: int):
        '''Adjusts the quantity by delta, clamped at zero.'''
        self.quantity = max(0, self.quantity + delta)

    def __eq__(self, other):
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.item_name.lower() == other.item_name.lower()

    def __hash__(self):
        return hash(self.item_name.lower())

    def __str__(self) -> str:
        return f"{self.item_name} (Quantity: {self.quantity}, Priority: {self.priority})"

    __repr__ = __str__

    def to_dict(self):
        return {"item_name": self.item_name, "quantity": self.quantity, "priority": self.priority}
