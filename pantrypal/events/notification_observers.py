"""Observers that turn pantry expiry events into persisted notifications.

Each event becomes one notification for the user named in the payload. A
message that is already stored for that user is not added again, so repeated
expiration checks do not flood the notifications list.
"""
from __future__ import annotations
import logging
from typing import Any

from pantrypal.events.Event_Bus import EventBus, PANTRY_EXPIRED, PANTRY_NEAR_EXPIRY
from pantrypal.infra.Notification_Repository import NotificationRepository
from pantrypal.utilities.constants import READ_MARKER

logger = logging.getLogger(__name__)


def format_expiry_message(event_name: str, payload: dict) -> str:
    item = payload['item']
    expires = item.expiration_date.isoformat()
    if event_name == PANTRY_EXPIRED:
        return f"{item.item_name} expired on {expires}"
    days_left = payload.get('days_left', 0)
    if days_left == 0:
        return f"{item.item_name} expires today ({expires})"
    unit = "day" if days_left == 1 else "days"
    return f"{item.item_name} expires in {days_left} {unit} ({expires})"


class ExpiryNotifier:
    """Callable subscriber writing expiry alerts through a NotificationRepository."""

    def __init__(self, notifications: NotificationRepository):
        self.notifications = notifications

    def __call__(self, event_name: str, payload: Any):
        user = payload['user']
        message = format_expiry_message(event_name, payload)
        existing = self.notifications.list_for(user.id)
        if message in existing or message + READ_MARKER in existing:
            return
        self.notifications.append(user.id, message)
        logger.info(f"Notification recorded for {user.username}: {message}")

    def register(self, bus: EventBus) -> "ExpiryNotifier":
        bus.subscribe(PANTRY_EXPIRED, self)
        bus.subscribe(PANTRY_NEAR_EXPIRY, self)
        return self


__all__ = ['ExpiryNotifier', 'format_expiry_message']
