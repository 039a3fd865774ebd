from typing import Final

# On-disk layout under the user's home directory
DIRECTORY_NAME: Final[str] = "PantryPal"
USERS_FILE_NAME: Final[str] = "users.csv"
PANTRY_FILE_NAME: Final[str] = "pantry.csv"
NOTIFICATIONS_FILE_NAME: Final[str] = "notifications.csv"

FIELD_SEPARATOR: Final[str] = ","
USER_FIELD_COUNT: Final[int] = 4
PANTRY_FIELD_COUNT: Final[int] = 6

DATE_FORMAT: Final[str] = "%Y-%m-%d"

ID_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
ID_LENGTH: Final[int] = 16
SALT_BYTES: Final[int] = 16

PRIORITIES: Final[tuple[str, ...]] = ("High", "Medium", "Low")
DEFAULT_PRIORITY: Final[str] = "Medium"

READ_MARKER: Final[str] = " (Read)"
DAYS_BEFORE_EXPIRY: Final[int] = 3
