# chatroom_server/models/user.py
"""
Database model for users.
Represents an account that may create and mutate chatrooms, holding the
password hash, profile information and the ids of the chatrooms it owns.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Username and email must be unique across all users

    Relationships:
    - chatroom_ids lists ChatRoom ids as plain strings. It is an unenforced
      cross-reference: deleting a chatroom does not remove its id here.
    """
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)  # Store-internal identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login name (unique, immutable after creation)
    password_hash = fields.CharField(max_length=255)  # argon2 hash, never returned to clients
    first_name = fields.CharField(max_length=128, default="")
    last_name = fields.CharField(max_length=128, default="")
    email = fields.CharField(max_length=256, unique=True)
    chatroom_ids = fields.JSONField(default=list)  # Ordered ChatRoom ids owned by this user
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
        ordering = ["created_at"]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
