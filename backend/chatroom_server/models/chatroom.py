# chatroom_server/models/chatroom.py
"""
Database model for chatrooms.
Each chatroom is stored as one document: its member list and message history
are embedded JSON arrays rather than separate tables.
"""
import uuid
from tortoise import fields, models

class ChatRoom(models.Model):
    """
    ChatRoom database model.

    Embedded documents:
    - users: [{"username": str}, ...] in join order
    - messages: [{"id": int | str, "message": str}, ...] in posting order

    Both lists start empty and are replaced wholesale on update.
    """
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)  # Store-assigned identifier
    title = fields.CharField(max_length=256)
    category = fields.CharField(max_length=256, index=True)
    users = fields.JSONField(default=list)
    messages = fields.JSONField(default=list)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "chatrooms"
        ordering = ["created_at"]
