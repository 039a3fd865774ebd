"""PantryItem domain entity: name, quantity, unit, expiration date, category."""
import re
from datetime import date, datetime
from typing import Optional

from pantrypal.domain.errors import NegativeQuantityError, ParseFailureError
from pantrypal.utilities.constants import DATE_FORMAT

_QUANTITY_PATTERN = re.compile(r'[+-]?[0-9]+')
_DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')


def parse_quantity(text: str) -> int:
    '''Parse a signed decimal integer ("12", "+3", "-1"). Raises ParseFailureError.'''
    if not isinstance(text, str) or not _QUANTITY_PATTERN.fullmatch(text):
        raise ParseFailureError(f"Quantity must be a whole number: {text!r}")
    return int(text)


def parse_expiration_date(text: str) -> date:
    '''Parse an ISO calendar date (YYYY-MM-DD). Raises ParseFailureError.'''
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        raise ParseFailureError(f"Expiration date must be YYYY-MM-DD: {text!r}")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise ParseFailureError(f"Expiration date is not a valid date: {text!r}") from e


class PantryItem:
    def __init__(self, item_name: str, quantity: int, unit: str,
                 expiration_date: date, category: str):
        self.item_name = item_name
        self.quantity = quantity
        self.unit = unit
        self.expiration_date = expiration_date
        self.category = category

    def update_quantity(self, delta: int):
        '''Adjusts the quantity by delta; refuses to go below zero.'''
        new_quantity = self.quantity + delta
        if new_quantity < 0:
            raise NegativeQuantityError(self.quantity, delta)
        self.quantity = new_quantity

    def is_expired(self, today: Optional[date] = None) -> bool:
        '''True once the calendar day is strictly after the expiration date.'''
        today = today or date.today()
        return today > self.expiration_date

    def days_until_expiry(self, today: Optional[date] = None) -> int:
        today = today or date.today()
        return (self.expiration_date - today).days

    def __eq__(self, other):
        if not isinstance(other, PantryItem):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def _key(self):
        return (self.item_name, self.quantity, self.unit, self.expiration_date, self.category)

    def __str__(self) -> str:
        return (f"PantryItem(item_name={self.item_name!r}, quantity={self.quantity}, "
                f"unit={self.unit!r}, expiration_date={self.expiration_date.isoformat()}, "
                f"category={self.category!r})")

    __repr__ = __str__

    def to_dict(self):
        '''Converts the PantryItem to a JSON-friendly dictionary.'''
        return {
            "item_name": self.item_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "expiration_date": self.expiration_date.isoformat(),
            "category": self.category,
        }
