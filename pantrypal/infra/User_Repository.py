"""User repository (users.csv persistence).

Row format: ``id,username,hashedPassword,salt``. Appending is the only write.
"""
import logging
from typing import List, Optional

from pantrypal.domain.User import User
from pantrypal.domain.errors import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidFieldError,
)
from pantrypal.infra import security
from pantrypal.infra.id_allocator import IdAllocator
from pantrypal.infra.line_file import read_lines, append_line, check_text_field
from pantrypal.infra.paths import DataPaths
from pantrypal.utilities.constants import FIELD_SEPARATOR, USER_FIELD_COUNT

logger = logging.getLogger(__name__)


def _parse_user(line: str) -> Optional[User]:
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != USER_FIELD_COUNT or not all(parts):
        return None
    user_id, username, hashed_password, salt = parts
    return User(id=user_id, username=username, hashed_password=hashed_password, salt=salt)


def _format_user(user: User) -> str:
    return FIELD_SEPARATOR.join((user.id, user.username, user.hashed_password, user.salt))


class UserRepository:
    def __init__(self, paths: DataPaths, id_allocator: IdAllocator):
        self.paths = paths
        self.id_allocator = id_allocator

    def load_all(self) -> List[User]:
        """Read every well-formed user row; malformed lines are skipped."""
        users = []
        for number, line in enumerate(read_lines(self.paths.users_file), start=1):
            user = _parse_user(line)
            if user is None:
                logger.debug(f"Skipping malformed user row {number} in {self.paths.users_file}")
                continue
            users.append(user)
        return users

    def known_ids(self) -> List[str]:
        return [user.id for user in self.load_all()]

    def create(self, username: str, password: str) -> User:
        """Create, persist and return a new user. Usernames are unique."""
        check_text_field("username", username)
        if not username:
            raise InvalidFieldError("username", username, "must not be empty")
        if any(existing.username == username for existing in self.load_all()):
            raise DuplicateUsernameError(username)

        salt = security.generate_salt()
        user = User(
            id=self.id_allocator.new_id(),
            username=username,
            hashed_password=security.hash_password(password, salt),
            salt=salt,
        )
        self.paths.ensure_base_dir()
        append_line(self.paths.users_file, _format_user(user))
        logger.info(f"User registered: {username}")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """Return the user for a matching username/password pair.

        Raises InvalidCredentialsError without saying which half failed.
        """
        for user in self.load_all():
            if user.username == username and security.verify_password(password, user.salt, user.hashed_password):
                return user
        raise InvalidCredentialsError()
