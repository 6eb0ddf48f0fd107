# chatroom_server/api/routers/chatrooms.py
import uuid

from fastapi import APIRouter, Depends, Response, status

from chatroom_server.api.deps import get_store, require_credentials
from chatroom_server.core.db import Store
from chatroom_server.core.errors import ValidationError
from chatroom_server.repositories import chatrooms
from chatroom_server.schemas.chatroom import ChatRoomCreateIn, ChatRoomOut, ChatRoomUpdateIn

router = APIRouter(prefix="/chatrooms", tags=["chatrooms"])

# ===== Public reads =====
@router.get("", response_model=list[ChatRoomOut])
async def list_chatrooms(store: Store = Depends(get_store)):
    """
    List every chatroom in the store, oldest first.

    Returns:
        list: Chatroom objects with id, title, category, users and messages
    """
    rooms = await chatrooms.list_all(store)
    return [chatrooms.to_public(r) for r in rooms]

@router.get("/distinct", response_model=list[str])
async def list_categories(store: Store = Depends(get_store)):
    """
    Return each category used by at least one chatroom, without duplicates.
    """
    return await chatrooms.distinct_categories(store)

@router.get("/{room_id}", response_model=ChatRoomOut)
async def get_chatroom(room_id: str, store: Store = Depends(get_store)):
    room = await chatrooms.find_by_id(store, room_id)
    return chatrooms.to_public(room)

# ===== Mutations (Basic credentials required) =====
@router.post(
    "",
    response_model=ChatRoomOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_credentials)],
)
async def create_chatroom(body: ChatRoomCreateIn, store: Store = Depends(get_store)):
    """
    Create an empty chatroom.

    Args:
        body: Request body containing title and category

    Returns:
        dict: The created chatroom; users and messages are always empty

    Raises:
        AuthError (401): If credentials are missing or wrong
        ValidationError (400): If title or category is missing or blank
    """
    room = await chatrooms.create(store, title=body.title, category=body.category)
    return chatrooms.to_public(room)

@router.put(
    "/{room_id}",
    response_model=ChatRoomOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_credentials)],
)
async def update_chatroom(room_id: str, body: ChatRoomUpdateIn, store: Store = Depends(get_store)):
    """
    Partially update a chatroom and echo the full record.

    Only fields present in the body change. `users` and `messages` replace
    the stored lists; a single object is accepted in place of a list.
    Responds 201 on success, which existing clients rely on.

    Raises:
        AuthError (401): If credentials are missing or wrong
        ValidationError (400): If the body id disagrees with the path id
        NotFoundError (404): If the chatroom does not exist
    """
    if body.id is not None:
        path_id = chatrooms.parse_id(room_id)
        try:
            body_id = uuid.UUID(body.id)
        except ValueError:
            raise ValidationError(f"Request body id ({body.id}) is not a valid chatroom id")
        if body_id != path_id:
            raise ValidationError(f"Request path id ({room_id}) and request body id ({body.id}) must match")
    changes = body.model_dump(exclude_unset=True, exclude={"id"}, exclude_none=True)
    room = await chatrooms.update(store, room_id, changes)
    return chatrooms.to_public(room)

@router.delete(
    "/{room_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_credentials)],
)
async def delete_chatroom(room_id: str, store: Store = Depends(get_store)):
    """
    Delete a chatroom. Owners' chatroom id lists are left as they are.

    Raises:
        AuthError (401): If credentials are missing or wrong
        NotFoundError (404): If the chatroom does not exist (also on a repeated delete)
    """
    await chatrooms.delete(store, room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
