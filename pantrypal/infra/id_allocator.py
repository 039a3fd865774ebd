import secrets
from typing import Iterable, Optional, Set

from pantrypal.utilities.constants import ID_ALPHABET, ID_LENGTH


class IdAllocator:
    """Hands out random 16-character alphanumeric ids, never the same one twice.

    The used set is process-local. Seed it with the ids already persisted so
    a restart cannot reissue one. Not synchronized; callers serialize access.
    """

    def __init__(self, used: Optional[Iterable[str]] = None):
        self._used: Set[str] = set(used or ())

    def seed(self, ids: Iterable[str]) -> None:
        self._used.update(ids)

    def new_id(self) -> str:
        while True:
            candidate = ''.join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate

    def __contains__(self, value: str) -> bool:
        return value in self._used

    def __len__(self) -> int:
        return len(self._used)
