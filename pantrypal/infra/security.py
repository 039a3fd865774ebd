"""Password salting and hashing for the users table.

The stored digest is a single SHA-256 over ``password + salt`` (both UTF-8),
base64 encoded. Existing users.csv files depend on this exact format.
"""
import base64
import hashlib
import hmac
import secrets

from pantrypal.domain.errors import HashAlgorithmUnavailableError
from pantrypal.utilities.constants import SALT_BYTES


def generate_salt() -> str:
    """Return base64 of 16 bytes from the OS CSPRNG."""
    return base64.b64encode(secrets.token_bytes(SALT_BYTES)).decode('ascii')


def _sha256():
    try:
        return hashlib.new('sha256')
    except ValueError as e:
        raise HashAlgorithmUnavailableError("Hashing algorithm not available: sha256") from e


def hash_password(password: str, salt: str) -> str:
    digest = _sha256()
    digest.update((password + salt).encode('utf-8'))
    return base64.b64encode(digest.digest()).decode('ascii')


def verify_password(password: str, salt: str, hashed_password: str) -> bool:
    """Constant-time check of ``password`` against a stored digest."""
    candidate = hash_password(password, salt)
    return hmac.compare_digest(candidate.encode('ascii'), hashed_password.encode('utf-8'))


__all__ = ['generate_salt', 'hash_password', 'verify_password']
