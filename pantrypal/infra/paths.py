from pathlib import Path
from typing import Optional

from pantrypal.utilities.constants import (
    DIRECTORY_NAME,
    USERS_FILE_NAME,
    PANTRY_FILE_NAME,
    NOTIFICATIONS_FILE_NAME,
)


class DataPaths:
    """Centralized paths for data files (single source of truth).

    Everything lives in ``<home>/PantryPal/``. ``home`` defaults to the home
    directory of the running process; tests pass a temporary directory.
    """

    def __init__(self, home: Optional[Path] = None):
        self.home = Path(home) if home is not None else Path.home()
        self.base_dir = self.home / DIRECTORY_NAME
        self.users_file = self.base_dir / USERS_FILE_NAME
        self.pantry_file = self.base_dir / PANTRY_FILE_NAME
        self.notifications_file = self.base_dir / NOTIFICATIONS_FILE_NAME

    def ensure_base_dir(self) -> Path:
        """Create the data directory if missing. OSError propagates unchanged."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        return self.base_dir

    def __repr__(self) -> str:
        return f"DataPaths({str(self.base_dir)!r})"


__all__ = ['DataPaths']
