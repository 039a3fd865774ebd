"""Exception types raised by the PantryPal core.

Filesystem failures are not wrapped: the stores let ``OSError`` propagate.
"""


class PantryPalError(Exception):
    """Base class for PantryPal domain errors."""


class DuplicateUsernameError(PantryPalError):
    def __init__(self, username: str):
        super().__init__(f"Username already exists: {username}")
        self.username = username


class InvalidCredentialsError(PantryPalError):
    def __init__(self):
        # Never say which half of the pair was wrong
        super().__init__("Invalid username or password.")


class NotAuthenticatedError(PantryPalError):
    def __init__(self, message: str = "You must be logged in to do that."):
        super().__init__(message)


class NegativeQuantityError(PantryPalError, ValueError):
    def __init__(self, quantity: int, delta: int):
        super().__init__(f"Quantity cannot be negative: {quantity} + ({delta}) = {quantity + delta}")
        self.quantity = quantity
        self.delta = delta


class ParseFailureError(PantryPalError, ValueError):
    """A quantity that is not an integer or a date that is not YYYY-MM-DD."""


class InvalidFieldError(PantryPalError, ValueError):
    """A text field that cannot be stored in a comma-separated row."""

    def __init__(self, field: str, value: str, reason: str):
        super().__init__(f"Invalid {field} {value!r}: {reason}")
        self.field = field
        self.value = value


class HashAlgorithmUnavailableError(PantryPalError, RuntimeError):
    pass


__all__ = [
    'PantryPalError', 'DuplicateUsernameError', 'InvalidCredentialsError',
    'NotAuthenticatedError', 'NegativeQuantityError', 'ParseFailureError',
    'InvalidFieldError', 'HashAlgorithmUnavailableError',
]
