# chat_backend/services/room_store.py
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from chat_backend.models.models import Message, Room


@runtime_checkable
class RoomStore(Protocol):
    """
    Gateway over the collection holding one document per room.

    Implementations:
        MongoRoomStore    - MongoDB through motor (production)
        InMemoryRoomStore - process-local dict (local runs, tests)
    """

    async def find_by_room_id(self, room_id: str) -> Optional[Room]:
        """Return the room with this identifier, or None if there is none."""
        ...

    async def save(self, room: Room) -> Room:
        """
        Insert a new room (room.id is None) or replace a stored one.

        Returns the persisted representation, including the store-assigned id.
        Raises RoomConflictError when inserting a duplicate roomId.
        """
        ...

    async def append_message(self, room_id: str, message: Message) -> bool:
        """Push a message onto a room's history. False if the room is missing."""
        ...

    async def ping(self) -> None:
        """Raise StoreUnavailableError if the store cannot be reached."""
        ...
