import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from chatroom_server.config import settings
from chatroom_server.core.db import open_store
from chatroom_server.core.security import hash_password
from chatroom_server.main import app
from chatroom_server.models.chatroom import ChatRoom
from chatroom_server.models.user import User

TEST_DB_URL = settings.test_database_url


@pytest_asyncio.fixture
async def store():
    """
    Open a clean in-memory store for every test and attach it to the app.
    Tables are recreated from scratch each time.
    """
    handle = await open_store(TEST_DB_URL)
    app.state.store = handle
    yield handle
    app.state.store = None
    await handle.close()


@pytest_asyncio.fixture
async def client(store):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app.
    Startup hooks are skipped; the `store` fixture stands in for them.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def seeded_user(store):
    """
    A registered account written directly via ORM, returned with its plaintext password.
    """
    password = "password"
    user = await User.create(
        using_db=store.connection,
        username=f"user_{uuid.uuid4().hex[:6]}",
        first_name="Ada",
        last_name="Lovelace",
        email=f"{uuid.uuid4().hex[:6]}@example.com",
        password_hash=hash_password(password),
        chatroom_ids=[],
    )
    return user, password


@pytest_asyncio.fixture
async def seeded_rooms(store):
    """
    Ten chatrooms, each with one member and one message, spread over four categories.
    """
    categories = ["anime", "games", "music", "anime", "sports", "games", "anime", "music", "games", "anime"]
    rooms = []
    for i, category in enumerate(categories, start=1):
        rooms.append(
            await ChatRoom.create(
                using_db=store.connection,
                title=f"room {i}",
                category=category,
                users=[{"username": f"member_{i}"}],
                messages=[{"id": i, "message": f"hello from room {i}"}],
            )
        )
    return rooms


@pytest_asyncio.fixture
async def auth(seeded_user):
    """Basic credentials tuple for the seeded account, as accepted by httpx's `auth=`."""
    user, password = seeded_user
    return (user.username, password)
