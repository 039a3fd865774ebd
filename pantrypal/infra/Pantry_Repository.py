"""Pantry repository helpers (pantry.csv persistence).

Row format: ``userId,itemName,quantity,unit,YYYY-MM-DD,category``.
Rows are never quoted, so text fields may not hold commas or line breaks.
"""
import logging
from typing import List, Optional

from pantrypal.domain.PantryItem import PantryItem, parse_quantity, parse_expiration_date
from pantrypal.domain.errors import InvalidFieldError, ParseFailureError
from pantrypal.infra.line_file import read_lines, append_line, rewrite_lines, check_text_field
from pantrypal.infra.paths import DataPaths
from pantrypal.utilities.constants import FIELD_SEPARATOR, PANTRY_FIELD_COUNT

logger = logging.getLogger(__name__)


def _format_row(user_id: str, item: PantryItem) -> str:
    check_text_field("user id", user_id)
    check_text_field("item name", item.item_name)
    check_text_field("unit", item.unit)
    check_text_field("category", item.category)
    if item.quantity < 0:
        raise InvalidFieldError("quantity", str(item.quantity), "must not be negative")
    return FIELD_SEPARATOR.join((
        user_id,
        item.item_name,
        str(item.quantity),
        item.unit,
        item.expiration_date.isoformat(),
        item.category,
    ))


def _parse_row(line: str) -> Optional[tuple]:
    """Return (user_id, PantryItem) for a well-formed row, else None."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != PANTRY_FIELD_COUNT:
        return None
    user_id, item_name, quantity_text, unit, date_text, category = parts
    try:
        quantity = parse_quantity(quantity_text)
        expiration_date = parse_expiration_date(date_text)
    except ParseFailureError:
        return None
    if quantity < 0:
        return None
    return user_id, PantryItem(item_name, quantity, unit, expiration_date, category)


def _matches(line: str, user_id: str, item_name: str) -> bool:
    # Only rows that list_for would return can be removed or replaced
    parsed = _parse_row(line)
    return parsed is not None and parsed[0] == user_id and parsed[1].item_name == item_name


class PantryRepository:
    def __init__(self, paths: DataPaths):
        self.paths = paths

    def append(self, user_id: str, item: PantryItem) -> None:
        """Append one row for ``user_id``; existing rows are never rewritten."""
        line = _format_row(user_id, item)
        self.paths.ensure_base_dir()
        append_line(self.paths.pantry_file, line)

    def list_for(self, user_id: str) -> List[PantryItem]:
        """Fresh PantryItem objects for the user's well-formed rows, in file order."""
        items = []
        for number, line in enumerate(read_lines(self.paths.pantry_file), start=1):
            parsed = _parse_row(line)
            if parsed is None:
                logger.debug(f"Skipping malformed pantry row {number} in {self.paths.pantry_file}")
                continue
            row_user_id, item = parsed
            if row_user_id == user_id:
                items.append(item)
        return items

    def remove_first(self, user_id: str, item_name: str) -> bool:
        """Drop the first row for (user_id, item_name). False if none matched."""
        return self._rewrite_first(user_id, item_name, replacement=None)

    def replace_first(self, user_id: str, item_name: str, item: PantryItem) -> bool:
        """Overwrite the first row for (user_id, item_name) with ``item``."""
        return self._rewrite_first(user_id, item_name, replacement=_format_row(user_id, item))

    def _rewrite_first(self, user_id: str, item_name: str, replacement: Optional[str]) -> bool:
        if not self.paths.pantry_file.exists():
            return False
        lines = read_lines(self.paths.pantry_file)
        for index, line in enumerate(lines):
            if _matches(line, user_id, item_name):
                if replacement is None:
                    del lines[index]
                else:
                    lines[index] = replacement
                rewrite_lines(self.paths.pantry_file, lines)
                logger.info(f"Pantry row for '{item_name}' {'removed' if replacement is None else 'updated'}")
                return True
        return False
