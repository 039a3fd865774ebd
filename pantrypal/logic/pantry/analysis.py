"""Pantry analysis helpers: which items are expired or about to expire."""
from __future__ import annotations
from datetime import date as _date
from typing import List, Iterable, Optional

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.utilities.constants import DAYS_BEFORE_EXPIRY

__all__ = ["compute_expired", "compute_expiring_soon"]


def compute_expired(items: Iterable[PantryItem], *, today: Optional[_date] = None) -> List[PantryItem]:
    """Items already past their expiration date, in the given order."""
    today = today or _date.today()
    return [item for item in items if item.is_expired(today)]


def compute_expiring_soon(items: Iterable[PantryItem], *, window: int | None = None,
                          today: Optional[_date] = None) -> List[PantryItem]:
    """Items that are not expired yet but expire within ``window`` days.

    Sorted by days left, then name.
    """
    expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
    today = today or _date.today()
    result = [
        item for item in items
        if not item.is_expired(today) and item.days_until_expiry(today) <= expiring_window
    ]
    result.sort(key=lambda item: (item.days_until_expiry(today), item.item_name))
    return result
