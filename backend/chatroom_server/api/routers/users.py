# chatroom_server/api/routers/users.py
from fastapi import APIRouter, Depends, status

from chatroom_server.api.deps import get_store
from chatroom_server.core.db import Store
from chatroom_server.repositories import users
from chatroom_server.schemas.user import UserCreateIn, UserOut

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=list[UserOut])
async def list_users(store: Store = Depends(get_store)):
    """
    List every registered user in public form (no password material).
    """
    rows = await users.list_all(store)
    return [users.to_public(u) for u in rows]

@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(body: UserCreateIn, store: Store = Depends(get_store)):
    """
    Register a new user account.

    The password is hashed before storage. Username and email must be unique
    across all users.

    Args:
        body: Request body containing username, password, email, firstName, lastName

    Returns:
        dict: username, fullName, email and ownChatRoom (empty for a new account)

    Error codes:
        - BAD_REQUEST (400): Missing or blank field
        - USERNAME_EXISTS (409): Username already taken
        - EMAIL_EXISTS (409): Email already registered
    """
    user = await users.create(
        store,
        username=body.username,
        password=body.password,
        email=body.email,
        first_name=body.firstName,
        last_name=body.lastName,
    )
    return users.to_public(user)
