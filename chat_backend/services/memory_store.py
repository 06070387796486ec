# chat_backend/services/memory_store.py
from __future__ import annotations

import uuid
from typing import Dict, Optional

from chat_backend.core.exceptions import RoomConflictError
from chat_backend.core.logging import get_logger
from chat_backend.models.models import Message, Room

logger = get_logger(__name__)


# ============================================================================
# IN-MEMORY ROOM STORE
# ============================================================================
class InMemoryRoomStore:
    """
    Keeps rooms in a process-local dictionary.

    Used for local development (ROOM_STORE=memory) and in tests. Nothing
    survives a restart and nothing is shared between instances; use
    MongoRoomStore for anything real.

    Rooms are copied on the way in and out so callers never hold a
    reference to stored state.

    Attributes:
        rooms: Dictionary mapping roomId -> Room
    """

    def __init__(self):
        self.rooms: Dict[str, Room] = {}

    async def find_by_room_id(self, room_id: str) -> Optional[Room]:
        room = self.rooms.get(room_id)
        return room.model_copy(deep=True) if room else None

    async def save(self, room: Room) -> Room:
        """
        Insert or replace a room.

        A room without an id is new: it gets a generated UUID and must not
        collide with an existing roomId. A room with an id replaces whatever
        is stored under its roomId.
        """
        if room.id is None:
            if room.room_id in self.rooms:
                raise RoomConflictError(room.room_id)
            stored = room.model_copy(update={"id": str(uuid.uuid4())}, deep=True)
        else:
            stored = room.model_copy(deep=True)

        self.rooms[stored.room_id] = stored
        return stored.model_copy(deep=True)

    async def append_message(self, room_id: str, message: Message) -> bool:
        room = self.rooms.get(room_id)
        if room is None:
            return False
        room.messages.append(message.model_copy())
        return True

    async def ping(self) -> None:
        return None

