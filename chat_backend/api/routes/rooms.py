# chat_backend/api/routes/rooms.py

from typing import List, Union

from fastapi import APIRouter, Body, Query, status
from fastapi.responses import JSONResponse

from chat_backend.core import state
from chat_backend.core.config import settings
from chat_backend.core.exceptions import RoomNotFoundError
from chat_backend.models.models import CreateRoomRequest, Message, Room, SendMessageRequest

router = APIRouter(prefix="/api/v1/rooms", tags=["rooms"])

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@router.post(
    "",
    response_model=Room,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(request: Union[CreateRoomRequest, str] = Body(...)):
    """
    Create a new, empty chatroom.

    Accepts either a bare JSON string ("general") or an object
    ({"roomId": "general"}).

    Returns:
        Room: The room as built before saving (no store id)

    Raises:
        RoomConflictError: 400 "Room already exists"
        InvalidRoomIdError: 400 "Room id required"
    """
    room_id = request if isinstance(request, str) else request.room_id
    return await state.room_service.create_room(room_id)


@router.get("/{roomId}", response_model=Room)
async def join_room(roomId: str):
    """
    Join (fetch) a room.

    Joining is a plain read: the full room including its message
    history is returned and nothing is recorded about the caller.

    Raises:
        RoomNotFoundError: 400 "Room does not exist"
    """
    return await state.room_service.join_room(roomId)


@router.get("/{roomId}/message", response_model=List[Message])
@router.get("/{roomId}/messages", response_model=List[Message])
async def get_messages(
    roomId: str,
    page: int = Query(0, ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
):
    """
    Fetch one page of a room's message history.

    Page 0 holds the newest `size` messages, page 1 the ones before that.
    Messages within a page are in chronological order. Pages past the
    beginning of the history are empty lists.

    Returns 400 with a null body if the room does not exist.
    """
    try:
        return await state.room_service.get_messages(roomId, page=page, size=size)
    except RoomNotFoundError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=None)


@router.post(
    "/{roomId}/messages",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(roomId: str, request: SendMessageRequest):
    """
    Append a message to a room's history.

    The server stamps the message with the current UTC time. Delivery to
    connected clients is not handled here.

    Raises:
        RoomNotFoundError: 400 "Room does not exist"
    """
    return await state.room_service.send_message(roomId, request.sender, request.content)
