"""
Password hashing and verification.

Uses argon2id (``argon2-cffi``) with the library's default cost
parameters.  Each hash carries its own random salt and parameters in the
PHC string format, so verification needs nothing but the stored value.
"""

from __future__ import annotations

from argon2 import PasswordHasher
from argon2 import exceptions as argon2_exceptions

from auth.errors import HashingError

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with argon2id (fresh salt on every call)."""
    if not password:
        raise HashingError("password must not be empty")
    try:
        return _hasher.hash(password)
    except argon2_exceptions.HashingError as exc:
        raise HashingError(f"could not hash password: {exc}") from exc


def check_password_hash(password: str, hashed: str) -> bool:
    """
    Constant-time comparison against an argon2 hash.

    Returns ``False`` only for a wrong password.  A stored hash that cannot
    be parsed raises ``HashingError`` instead.
    """
    try:
        return _hasher.verify(hashed, password)
    except argon2_exceptions.VerifyMismatchError:
        return False
    except argon2_exceptions.InvalidHashError as exc:
        raise HashingError("stored password hash is malformed") from exc
    except argon2_exceptions.VerificationError as exc:
        raise HashingError(f"could not verify password: {exc}") from exc
