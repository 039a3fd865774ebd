"""
Input validation schemas using Pydantic for the web shell.

These are the user-input parsing path: a quantity that is not an integer or a
date that is not YYYY-MM-DD is rejected here before it reaches the stores.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date

from pantrypal.domain.PantryItem import PantryItem, parse_expiration_date
from pantrypal.domain.ShoppingListItem import ShoppingListItem, normalize_priority


def _no_separators(v: str) -> str:
    if ',' in v:
        raise ValueError('Commas are not allowed')
    if '\n' in v or '\r' in v:
        raise ValueError('Line breaks are not allowed')
    return v


class CredentialsInput(BaseModel):
    """Schema for login and registration."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        """Usernames are stored verbatim in users.csv."""
        return _no_separators(v)


class PantryItemInput(BaseModel):
    """Schema for adding a pantry item."""
    item_name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., ge=0)
    unit: str = Field(..., max_length=20)
    expiration_date: str
    category: str = Field('', max_length=50)

    @field_validator('item_name', 'unit', 'category')
    @classmethod
    def strip_and_check(cls, v):
        """Remove leading/trailing whitespace and refuse row separators."""
        return _no_separators(v.strip())

    @field_validator('item_name')
    @classmethod
    def name_not_blank(cls, v):
        if not v:
            raise ValueError('Item name cannot be empty')
        return v

    @field_validator('expiration_date')
    @classmethod
    def validate_expiration_date(cls, v):
        parse_expiration_date(v.strip())
        return v.strip()

    def to_item(self) -> PantryItem:
        expiration: date = parse_expiration_date(self.expiration_date)
        return PantryItem(self.item_name, self.quantity, self.unit, expiration, self.category)


class QuantityUpdateInput(BaseModel):
    """Schema for a pantry quantity change (positive or negative delta)."""
    delta: int


class ShoppingListItemInput(BaseModel):
    """Schema for shopping list item validation."""
    item_name: str = Field(..., min_length=1, max_length=100)
    quantity: int = 1
    priority: Optional[str] = None

    @field_validator('item_name')
    @classmethod
    def strip_whitespace(cls, v):
        if not v.strip():
            raise ValueError('Item name cannot be empty')
        return v.strip()

    @field_validator('priority')
    @classmethod
    def validate_priority(cls, v):
        return normalize_priority(v)

    def to_item(self) -> ShoppingListItem:
        return ShoppingListItem(self.item_name, self.quantity, self.priority)


class NotificationInput(BaseModel):
    """Schema for a manually added notification."""
    message: str = Field(..., min_length=1, max_length=500)

    @field_validator('message')
    @classmethod
    def single_line(cls, v):
        if '\n' in v or '\r' in v:
            raise ValueError('Line breaks are not allowed')
        return v
