# chatroom_server/schemas/chatroom.py
"""
Pydantic schemas for chatroom endpoints.
Defines request bodies for creation and partial update, and the public
chatroom representation.
"""
from typing import Optional, List, Union

from pydantic import BaseModel, field_validator

class ChatUserEntry(BaseModel):
    """A member of a chatroom."""
    username: str

class MessageEntry(BaseModel):
    """A message posted in a chatroom. The id is client supplied (number or string)."""
    id: Union[int, str, None] = None
    message: str

def _as_list(value):
    # Clients may send a single object where a list is expected
    if isinstance(value, dict):
        return [value]
    return value

class ChatRoomCreateIn(BaseModel):
    """
    Request model for creating a chatroom.
    Members and messages always start empty, so only the labels are accepted.
    """
    title: str
    category: str

class ChatRoomUpdateIn(BaseModel):
    """
    Request model for a partial chatroom update.
    Only fields present in the body are applied; `users` and `messages`
    replace the stored lists wholesale.
    """
    id: Optional[str] = None  # Optional echo of the path id; must match when present
    title: Optional[str] = None
    category: Optional[str] = None
    users: Optional[List[ChatUserEntry]] = None
    messages: Optional[List[MessageEntry]] = None

    @field_validator("users", "messages", mode="before")
    @classmethod
    def wrap_single_entry(cls, value):
        return _as_list(value)

class ChatRoomOut(BaseModel):
    """Public chatroom representation."""
    id: str
    title: str
    category: str
    users: List[ChatUserEntry]
    messages: List[MessageEntry]
