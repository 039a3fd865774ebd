"""User domain entity: id, username and salted password digest."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """A registered user as stored in users.csv. Never mutated once created."""

    id: str
    username: str
    hashed_password: str = field(repr=False)
    salt: str = field(repr=False)

    def to_dict(self):
        '''Public view of the user (no credential material).'''
        return {"id": self.id, "username": self.username}
