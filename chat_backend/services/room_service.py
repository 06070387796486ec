# chat_backend/services/room_service.py
from __future__ import annotations

from typing import List, Sequence, TypeVar

from chat_backend.core.config import settings
from chat_backend.core.exceptions import (
    InvalidPaginationError,
    InvalidRoomIdError,
    RoomConflictError,
    RoomNotFoundError,
)
from chat_backend.core.logging import get_logger
from chat_backend.models.models import Message, Room
from chat_backend.services.room_store import RoomStore

logger = get_logger(__name__)

T = TypeVar("T")


def newest_first_page(items: Sequence[T], page: int, size: int) -> List[T]:
    """
    Slice one page out of an oldest-first sequence, counting pages from the end.

    Page 0 is the most recent ``size`` items, page 1 the ``size`` before
    those, and so on. Items inside a page keep chronological order. A page
    past the start of the history is empty.

    Example (25 items, size 20):
        page 0 -> items[5:25]
        page 1 -> items[0:5]
        page 2 -> []
    """
    if page < 0 or size < 1:
        raise InvalidPaginationError()

    total = len(items)
    end = max(0, total - page * size)
    start = max(0, end - size)
    return list(items[start:end])


# ============================================================================
# ROOM SERVICE
# ============================================================================
class RoomService:
    """
    Room operations exposed by the REST API.

    Stateless apart from the store it wraps; one instance is shared by all
    requests (see core/state.py).
    """

    def __init__(self, store: RoomStore):
        self.store = store

    async def create_room(self, room_id: str) -> Room:
        """
        Create an empty room.

        Returns:
            Room: the room as built before saving (no store id)

        Raises:
            InvalidRoomIdError: room_id is blank
            RoomConflictError: a room with this id already exists
        """
        if not room_id or not room_id.strip():
            raise InvalidRoomIdError(room_id)

        if await self.store.find_by_room_id(room_id) is not None:
            raise RoomConflictError(room_id)

        room = Room(room_id=room_id, messages=[])
        await self.store.save(room)
        logger.info(f"✓ Created room: {room_id}")
        return room

    async def join_room(self, room_id: str) -> Room:
        """Return the room with its full history. Joining keeps no state."""
        room = await self.store.find_by_room_id(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    async def get_messages(self, room_id: str, page: int = 0, size: int | None = None) -> List[Message]:
        size = settings.DEFAULT_PAGE_SIZE if size is None else size
        if page < 0 or size < 1:
            raise InvalidPaginationError(room_id)

        room = await self.store.find_by_room_id(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return newest_first_page(room.messages, page, size)

    async def send_message(self, room_id: str, sender: str, content: str) -> Message:
        """Append a message to the room's history and return it."""
        message = Message(sender=sender, content=content)
        if not await self.store.append_message(room_id, message):
            raise RoomNotFoundError(room_id)
        logger.info(f"Message from {sender} stored in room {room_id}")
        return message
