import pytest

from chatroom_server.models.user import User
from chatroom_server.repositories import users


pytestmark = pytest.mark.asyncio


NEW_USER = {
    "username": "kek",
    "password": "life",
    "email": "kek@gmail.com",
    "firstName": "Sen",
    "lastName": "Mikimoto",
}


async def test_list_users(client, seeded_user):
    resp = await client.get("/users")
    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, list)
    assert len(body) == await User.all().count()


async def test_list_users_shape(client, seeded_user):
    user, _ = seeded_user
    user.chatroom_ids = ["room-a", "room-b"]
    await user.save()

    resp = await client.get("/users")
    item = resp.json()[0]
    assert set(item) == {"username", "fullName", "email", "ownChatRoom"}
    assert item["username"] == user.username
    assert item["fullName"] == f"{user.first_name} {user.last_name}".strip()
    assert item["email"] == user.email
    assert item["ownChatRoom"] == ["room-a", "room-b"]


async def test_register_user(client, store):
    resp = await client.post("/users", json=NEW_USER)
    assert resp.status_code == 201
    assert resp.json() == {
        "username": "kek",
        "fullName": "Sen Mikimoto",
        "email": "kek@gmail.com",
        "ownChatRoom": [],
    }

    stored = await User.get(username="kek")
    assert stored.first_name == "Sen"
    assert stored.last_name == "Mikimoto"
    assert await users.verify_credentials(store, "kek", "life") is True
    assert await users.verify_credentials(store, "kek", "lives") is False


async def test_registered_user_can_create_chatroom(client):
    await client.post("/users", json=NEW_USER)
    resp = await client.post(
        "/chatrooms",
        json={"title": "kagami", "category": "anime"},
        auth=(NEW_USER["username"], NEW_USER["password"]),
    )
    assert resp.status_code == 201


async def test_register_never_returns_password_material(client):
    resp = await client.post("/users", json=NEW_USER)
    text = resp.text
    assert "life" not in text
    assert "password" not in text.lower()


async def test_register_duplicate_username(client):
    await client.post("/users", json=NEW_USER)
    resp = await client.post("/users", json={**NEW_USER, "email": "other@gmail.com"})
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "USERNAME_EXISTS"
    assert await User.filter(username="kek").count() == 1


async def test_register_duplicate_email(client):
    await client.post("/users", json=NEW_USER)
    resp = await client.post("/users", json={**NEW_USER, "username": "kek2"})
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "EMAIL_EXISTS"


@pytest.mark.parametrize("missing", ["username", "password", "email", "firstName", "lastName"])
async def test_register_missing_field(client, missing):
    payload = {k: v for k, v in NEW_USER.items() if k != missing}
    resp = await client.post("/users", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "BAD_REQUEST"
    assert missing in resp.json()["detail"]["message"]
    assert await User.all().count() == 0


async def test_register_blank_field(client):
    resp = await client.post("/users", json={**NEW_USER, "username": "   "})
    assert resp.status_code == 400
    assert await User.all().count() == 0
