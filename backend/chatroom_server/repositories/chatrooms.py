"""
ChatRoom persistence helpers.

Chatrooms are whole documents: members and messages travel with the record,
so every mutation here is a single save of one row.
"""

from __future__ import annotations

import uuid
from typing import Any

from chatroom_server.core.db import Store
from chatroom_server.core.errors import NotFoundError, ValidationError
from chatroom_server.models.chatroom import ChatRoom

UPDATABLE_FIELDS = ("title", "category", "users", "messages")


def parse_id(raw: str | uuid.UUID) -> uuid.UUID:
    """Turn a path id into a UUID; ids that cannot exist are reported as not found."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError as exc:
        raise NotFoundError(f"Chatroom {raw} not found") from exc


def to_public(room: ChatRoom) -> dict:
    return {
        "id": str(room.id),
        "title": room.title,
        "category": room.category,
        "users": list(room.users or []),
        "messages": list(room.messages or []),
    }


async def create(store: Store, *, title: str, category: str) -> ChatRoom:
    title = (title or "").strip()
    category = (category or "").strip()
    if not title or not category:
        raise ValidationError("title and category are required")
    return await ChatRoom.create(
        using_db=store.connection,
        title=title,
        category=category,
        users=[],
        messages=[],
    )


async def list_all(store: Store) -> list[ChatRoom]:
    return await ChatRoom.all().using_db(store.connection)


async def find_by_id(store: Store, room_id: str | uuid.UUID) -> ChatRoom:
    room = await ChatRoom.get_or_none(id=parse_id(room_id), using_db=store.connection)
    if room is None:
        raise NotFoundError(f"Chatroom {room_id} not found")
    return room


async def distinct_categories(store: Store) -> list[str]:
    return await (
        ChatRoom.all()
        .using_db(store.connection)
        .distinct()
        .order_by("category")
        .values_list("category", flat=True)
    )


async def update(store: Store, room_id: str | uuid.UUID, changes: dict[str, Any]) -> ChatRoom:
    """
    Apply a partial update and return the full record.

    Keys outside title/category/users/messages are ignored; keys that are
    absent leave the stored value as it was.
    """
    fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    for name in ("title", "category"):
        if name in fields and not (fields[name] or "").strip():
            raise ValidationError(f"{name} cannot be blank")

    room = await find_by_id(store, room_id)
    if not fields:
        return room

    for name, value in fields.items():
        setattr(room, name, value.strip() if isinstance(value, str) else value)
    await room.save(using_db=store.connection, update_fields=list(fields))
    return room


async def delete(store: Store, room_id: str | uuid.UUID) -> None:
    deleted = await ChatRoom.filter(id=parse_id(room_id)).using_db(store.connection).delete()
    if not deleted:
        raise NotFoundError(f"Chatroom {room_id} not found")
