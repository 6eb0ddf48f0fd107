# chatroom_server/schemas/user.py
"""
Pydantic schemas for user endpoints.
"""
from typing import List

from pydantic import BaseModel

class UserCreateIn(BaseModel):
    """
    Request model for account registration.
    All fields are required; the password is hashed server-side.
    """
    username: str
    password: str
    email: str
    firstName: str
    lastName: str

class UserOut(BaseModel):
    """
    Public user representation.
    Never carries password material.
    """
    username: str
    fullName: str  # "firstName lastName", trimmed
    email: str
    ownChatRoom: List[str]  # Ids of chatrooms owned by this user
