# chatroom_server/repositories/__init__.py
"""
Store adapters.
- chatrooms: create, list, fetch, update and delete chatroom documents
- users: account registration, lookup and credential verification
"""
