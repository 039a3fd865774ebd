"""Core business logic layer.

Modules:
- session: the signed-in user, shopping list and notification ingress
- pantry: pantry analysis helpers (expired / expiring soon)
"""
__all__ = ["session", "pantry"]
