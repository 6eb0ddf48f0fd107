# chatroom_server/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .chatroom import *
from .user import *
