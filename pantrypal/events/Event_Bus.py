"""Simple Event Bus / Observer implementation for pantry alerts.

Event names used so far:
  pantry.expired -> payload {"user": User, "item": PantryItem, "days_left": int}
  pantry.near_expiry -> payload {"user": User, "item": PantryItem, "days_left": int, "threshold": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PANTRY_EXPIRED = "pantry.expired"
PANTRY_NEAR_EXPIRY = "pantry.near_expiry"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			pass

	def publish(self, event_name: str, payload: Any) -> int:
		"""Deliver to every subscriber; returns how many handled it without error."""
		delivered = 0
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
				delivered += 1
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)
		return delivered


__all__ = ['EventBus', 'PANTRY_EXPIRED', 'PANTRY_NEAR_EXPIRY']
