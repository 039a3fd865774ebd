"""ShoppingList aggregate: in-memory list of items to purchase."""

from typing import List

from pantrypal.domain.ShoppingListItem import ShoppingListItem


class ShoppingList:
    def __init__(self):
        self.items: List[ShoppingListItem] = []

    def add(self, item: ShoppingListItem):
        '''
        Adds an item to the shopping list.
        '''
        self.items.append(item)

    def remove_by_name(self, item_name: str) -> bool:
        '''
        Removes every item whose name matches, ignoring case.
        Returns True if anything was removed.
        '''
        wanted = item_name.lower()
        kept = [item for item in self.items if item.item_name.lower() != wanted]
        removed = len(kept) != len(self.items)
        self.items = kept
        return removed

    def snapshot(self) -> List[ShoppingListItem]:
        '''
        Returns a copy of the items; changing it does not change the list.
        '''
        return list(self.items)

    def clear(self):
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
