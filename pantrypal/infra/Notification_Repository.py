"""Notification repository (notifications.csv persistence).

Row format: ``userId,message``. Rows are split once, so the message keeps any
commas it contains. Messages may not contain line breaks.
"""
import logging
from typing import List, Optional, Tuple

from pantrypal.infra.line_file import read_lines, append_line, rewrite_lines, check_text_field
from pantrypal.infra.paths import DataPaths
from pantrypal.utilities.constants import FIELD_SEPARATOR, READ_MARKER

logger = logging.getLogger(__name__)


def _split(line: str) -> Optional[Tuple[str, str]]:
    parts = line.split(FIELD_SEPARATOR, 1)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


class NotificationRepository:
    def __init__(self, paths: DataPaths):
        self.paths = paths

    def append(self, user_id: str, message: str) -> None:
        check_text_field("user id", user_id)
        check_text_field("message", message, allow_comma=True)
        self.paths.ensure_base_dir()
        append_line(self.paths.notifications_file, f"{user_id}{FIELD_SEPARATOR}{message}")

    def list_for(self, user_id: str) -> List[str]:
        messages = []
        for line in read_lines(self.paths.notifications_file):
            row = _split(line)
            if row is not None and row[0] == user_id:
                messages.append(row[1])
        return messages

    def clear_for(self, user_id: str) -> None:
        """Rewrite the file keeping only rows that belong to other users."""
        if not self.paths.notifications_file.exists():
            return
        lines = read_lines(self.paths.notifications_file)
        kept = []
        for line in lines:
            row = _split(line)
            if row is None or row[0] != user_id:
                kept.append(line)
        rewrite_lines(self.paths.notifications_file, kept)
        logger.info(f"Cleared {len(lines) - len(kept)} notification(s)")

    def mark_all_read(self, user_id: str) -> int:
        """Append the read marker to each of the user's unread messages.

        Returns the number of messages changed.
        """
        if not self.paths.notifications_file.exists():
            return 0
        lines = read_lines(self.paths.notifications_file)
        changed = 0
        for index, line in enumerate(lines):
            row = _split(line)
            if row is None or row[0] != user_id or row[1].endswith(READ_MARKER):
                continue
            lines[index] = line + READ_MARKER
            changed += 1
        if changed:
            rewrite_lines(self.paths.notifications_file, lines)
        return changed
