"""Application session: the signed-in user, the shopping list and notifications.

One Session per process. Pantry, shopping-list and notification calls need a
signed-in user and raise NotAuthenticatedError otherwise. The Session holds the
User; the User knows nothing about the Session.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import List, Optional

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.domain.ShoppingList import ShoppingList
from pantrypal.domain.ShoppingListItem import ShoppingListItem
from pantrypal.domain.User import User
from pantrypal.domain.errors import InvalidCredentialsError, NotAuthenticatedError
from pantrypal.events.Event_Bus import EventBus, PANTRY_EXPIRED, PANTRY_NEAR_EXPIRY
from pantrypal.events.notification_observers import ExpiryNotifier
from pantrypal.infra.Notification_Repository import NotificationRepository
from pantrypal.infra.Pantry_Repository import PantryRepository
from pantrypal.infra.User_Repository import UserRepository
from pantrypal.infra.id_allocator import IdAllocator
from pantrypal.infra.paths import DataPaths
from pantrypal.logic.pantry.analysis import compute_expired, compute_expiring_soon
from pantrypal.utilities.constants import DAYS_BEFORE_EXPIRY

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, paths: Optional[DataPaths] = None, id_allocator: Optional[IdAllocator] = None,
                 event_bus: Optional[EventBus] = None):
        self.paths = paths or DataPaths()
        self.id_allocator = id_allocator or IdAllocator()
        self.event_bus = event_bus or EventBus()

        self.users = UserRepository(self.paths, self.id_allocator)
        self.pantry = PantryRepository(self.paths)
        self.notifications = NotificationRepository(self.paths)

        # Ids already on disk must never be handed out again
        self.id_allocator.seed(self.users.known_ids())
        ExpiryNotifier(self.notifications).register(self.event_bus)

        self._current_user: Optional[User] = None
        self.shopping_list = ShoppingList()

    # --- Identity -----------------------------------------------------------
    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def require_user(self) -> User:
        if self._current_user is None:
            raise NotAuthenticatedError()
        return self._current_user

    def register(self, username: str, password: str) -> User:
        """Create a new user. Allowed whether or not someone is signed in."""
        return self.users.create(username, password)

    def login(self, username: str, password: str) -> User:
        try:
            user = self.users.authenticate(username, password)
        except InvalidCredentialsError:
            logger.warning("Failed login attempt")
            raise
        self._current_user = user
        logger.info(f"User logged in: {user.username}")
        return user

    def logout(self):
        if self._current_user is not None:
            logger.info(f"User logged out: {self._current_user.username}")
        self._current_user = None
        self.shopping_list.clear()

    # --- Pantry -------------------------------------------------------------
    def list_pantry(self) -> List[PantryItem]:
        return self.pantry.list_for(self.require_user().id)

    def add_pantry_item(self, item: PantryItem) -> PantryItem:
        self.pantry.append(self.require_user().id, item)
        return item

    def remove_pantry_item(self, item_name: str) -> bool:
        return self.pantry.remove_first(self.require_user().id, item_name)

    def update_pantry_quantity(self, item_name: str, delta: int) -> Optional[PantryItem]:
        """Apply ``delta`` to the first item named ``item_name`` and persist it.

        Returns the updated item, or None if the user has no such item.
        NegativeQuantityError leaves the stored row untouched.
        """
        user = self.require_user()
        for item in self.pantry.list_for(user.id):
            if item.item_name == item_name:
                item.update_quantity(delta)
                self.pantry.replace_first(user.id, item_name, item)
                return item
        return None

    def expired_items(self, today: Optional[date] = None) -> List[PantryItem]:
        return compute_expired(self.list_pantry(), today=today)

    def check_expirations(self, window: Optional[int] = None, today: Optional[date] = None) -> int:
        """Publish an event for every expired or soon-to-expire item.

        Returns the number of events published.
        """
        user = self.require_user()
        today = today or date.today()
        window = window if window is not None else DAYS_BEFORE_EXPIRY
        items = self.pantry.list_for(user.id)
        published = 0
        for item in compute_expired(items, today=today):
            self.event_bus.publish(PANTRY_EXPIRED, {
                "user": user,
                "item": item,
                "days_left": item.days_until_expiry(today),
            })
            published += 1
        for item in compute_expiring_soon(items, window=window, today=today):
            self.event_bus.publish(PANTRY_NEAR_EXPIRY, {
                "user": user,
                "item": item,
                "days_left": item.days_until_expiry(today),
                "threshold": window,
            })
            published += 1
        return published

    # --- Shopping list ------------------------------------------------------
    def add_shopping_item(self, item: ShoppingListItem) -> ShoppingListItem:
        self.require_user()
        self.shopping_list.add(item)
        return item

    def remove_shopping_item(self, item_name: str) -> bool:
        self.require_user()
        return self.shopping_list.remove_by_name(item_name)

    def list_shopping_items(self) -> List[ShoppingListItem]:
        self.require_user()
        return self.shopping_list.snapshot()

    def clear_shopping_list(self):
        self.require_user()
        self.shopping_list.clear()

    # --- Notifications ------------------------------------------------------
    def add_notification(self, message: str):
        self.notifications.append(self.require_user().id, message)

    def list_notifications(self) -> List[str]:
        return self.notifications.list_for(self.require_user().id)

    def clear_notifications(self):
        self.notifications.clear_for(self.require_user().id)

    def mark_notifications_read(self) -> int:
        return self.notifications.mark_all_read(self.require_user().id)
