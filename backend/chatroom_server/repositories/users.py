"""
User persistence helpers.

Every function takes the open `Store` handle as its first argument and routes
its queries through `store.connection`.
"""

from __future__ import annotations

import logging

from tortoise.exceptions import IntegrityError

from chatroom_server.core import security
from chatroom_server.core.db import Store
from chatroom_server.core.errors import ConflictError, ValidationError
from chatroom_server.models.user import User

logger = logging.getLogger("uvicorn.error")

REQUIRED_FIELDS = ("username", "password", "email", "first_name", "last_name")


def to_public(user: User) -> dict:
    return {
        "username": user.username,
        "fullName": user.full_name,
        "email": user.email,
        "ownChatRoom": list(user.chatroom_ids or []),
    }


async def _find_conflict(store: Store, username: str, email: str) -> ConflictError | None:
    if await User.filter(username=username).using_db(store.connection).exists():
        return ConflictError("Username already exists", code="USERNAME_EXISTS")
    if await User.filter(email=email).using_db(store.connection).exists():
        return ConflictError("Email already registered", code="EMAIL_EXISTS")
    return None


async def create(
    store: Store,
    *,
    username: str,
    password: str,
    email: str,
    first_name: str,
    last_name: str,
) -> User:
    values = {
        "username": (username or "").strip(),
        "password": password or "",
        "email": (email or "").strip(),
        "first_name": (first_name or "").strip(),
        "last_name": (last_name or "").strip(),
    }
    missing = [name for name in REQUIRED_FIELDS if not values[name]]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

    conflict = await _find_conflict(store, values["username"], values["email"])
    if conflict is not None:
        raise conflict

    try:
        user = await User.create(
            using_db=store.connection,
            username=values["username"],
            email=values["email"],
            first_name=values["first_name"],
            last_name=values["last_name"],
            password_hash=security.hash_password(values["password"]),
            chatroom_ids=[],
        )
    except IntegrityError as exc:
        # A concurrent registration won the unique index after our checks
        conflict = await _find_conflict(store, values["username"], values["email"])
        raise (conflict or ConflictError("Username or email already exists")) from exc

    logger.info("[users] registered username=%s id=%s", user.username, user.id)
    return user


async def find_by_username(store: Store, username: str) -> User | None:
    return await User.get_or_none(username=username, using_db=store.connection)


async def list_all(store: Store) -> list[User]:
    return await User.all().using_db(store.connection)


async def verify_credentials(store: Store, username: str, password: str) -> bool:
    """
    True only when `username` exists and `password` matches its hash.

    An unknown username still pays for one hash verification, so callers
    (and timing observers) cannot tell it apart from a wrong password.
    """
    user = await find_by_username(store, username) if username else None
    if user is None:
        security.verify_password(password or "", security.dummy_hash())
        return False
    return security.verify_password(password or "", user.password_hash)
