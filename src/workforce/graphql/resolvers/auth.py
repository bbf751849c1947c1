"""
Signup and login resolvers
"""

from __future__ import annotations

import asyncio

from ... import repository
from ...database.connection import session_scope
from ...logging import get_logger
from ...rules import validate_signup
from ...security import hash_password, verify_password
from ..types.user import User

logger = get_logger(__name__)

USER_NOT_FOUND = "User not found!"
INVALID_PASSWORD = "Invalid password!"
LOGIN_SUCCESSFUL = "Login successful!"


async def signup(username: str | None, email: str | None, password: str | None) -> User:
    """Validate, hash the password and persist a new user."""
    username, email, password = validate_signup(username, email, password)

    # bcrypt is deliberately slow; keep it off the event loop
    loop = asyncio.get_running_loop()
    password_hash = await loop.run_in_executor(None, hash_password, password)

    async with session_scope() as session:
        user = await repository.create_user(
            session, username=username, email=email, password_hash=password_hash
        )
        result = User.from_model(user)

    logger.info("User signed up", user_id=result.id, username=username)
    return result


async def login(username: str | None, password: str | None) -> str:
    """Check a username/password pair.

    Returns a status message rather than a credential; no session is issued.
    """
    async with session_scope() as session:
        user = await repository.get_user_by_username(session, username) if username else None

    if user is None:
        logger.info("Login failed: unknown user", username=username)
        return USER_NOT_FOUND

    loop = asyncio.get_running_loop()
    matches = await loop.run_in_executor(None, verify_password, password or "", user.password)
    if not matches:
        logger.info("Login failed: invalid password", username=username)
        return INVALID_PASSWORD

    logger.info("Login successful", username=username)
    return LOGIN_SUCCESSFUL
