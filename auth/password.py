"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.  bcrypt only reads the first
72 bytes of a password, so longer passwords are refused outright.
"""

from __future__ import annotations

from typing import Optional

import bcrypt

MAX_PASSWORD_BYTES = 72


class HashingError(ValueError):
    """Raised when a password cannot be hashed (empty, too long or unencodable)."""


def _encode(password: str) -> bytes:
    try:
        raw = password.encode()
    except UnicodeEncodeError as exc:
        raise HashingError("Password is not valid UTF-8") from exc
    if len(raw) > MAX_PASSWORD_BYTES:
        raise HashingError(f"Password is longer than {MAX_PASSWORD_BYTES} bytes")
    return raw


def hash_password(password: Optional[str], rounds: int = 12) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    if not password or not isinstance(password, str):
        raise HashingError("Cannot hash an empty password")
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (AttributeError, ValueError, TypeError):
        return False
