# chatroom_server/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports throughout the application.

Models exported:
- User: Account, credentials and owned chatroom ids
- ChatRoom: Chatroom document with embedded users and messages
"""
from .user import User
from .chatroom import ChatRoom
