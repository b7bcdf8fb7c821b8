from __future__ import annotations

import logging

import bcrypt

from oleum.backend import insert, select_maybe_single
from oleum.errors import Conflict, NotFound, ValidationFailure
from oleum.models import User

logger = logging.getLogger(__name__)

USERS_TABLE = "users"

INVALID_CREDENTIALS = "Invalid username or password"
USERNAME_TAKEN = "Username already taken"

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, stored: str) -> bool:
    """
    Check ``password`` against a stored bcrypt hash.

    Anything that is not a bcrypt hash (e.g. a legacy plain-text value) never
    verifies.
    """
    if not stored:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), str(stored).encode("utf-8"))
    except ValueError:
        return False


def _normalize_credentials(username: str, password: str) -> tuple[str, str]:
    name = (username or "").strip()
    if not name:
        raise ValidationFailure("Username is required.")
    if not password:
        raise ValidationFailure("Password is required.")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationFailure(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
    return name, password


def login(client, username: str, password: str) -> User:
    name, password = _normalize_credentials(username, password)

    row = select_maybe_single(client, USERS_TABLE, eq={"name": name})
    if row is None or not verify_password(password, row.get("password") or ""):
        logger.info("Rejected sign-in for %r", name)
        raise NotFound(INVALID_CREDENTIALS)

    user = User.from_row(row)
    logger.info("User %s signed in", user.id)
    return user


def signup(client, username: str, password: str) -> User:
    name, password = _normalize_credentials(username, password)

    existing = select_maybe_single(client, USERS_TABLE, columns="id", eq={"name": name})
    if existing is not None:
        raise Conflict(USERNAME_TAKEN)

    row = insert(client, USERS_TABLE, {"name": name, "password": hash_password(password)})
    user = User.from_row(row)
    logger.info("Created user %s", user.id)
    return user
