# chatroom_server/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Store configuration and the connection handle passed to repositories
- errors: Error taxonomy mapped onto HTTP status codes
- security: Password hashing and verification
"""
