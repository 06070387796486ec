# chat_backend/services/mongo_store.py
from __future__ import annotations

from typing import Optional

import motor.motor_asyncio
from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from chat_backend.core.config import settings
from chat_backend.core.exceptions import RoomConflictError, StoreUnavailableError
from chat_backend.core.logging import get_logger
from chat_backend.models.models import Message, Room

logger = get_logger(__name__)


def create_mongo_client(uri: str | None = None) -> motor.motor_asyncio.AsyncIOMotorClient:
    """Build the async MongoDB client; one per process, owned by main.py."""
    client = motor.motor_asyncio.AsyncIOMotorClient(uri or settings.MONGO_URI, tz_aware=True)
    logger.info("MongoDB async client created.")
    return client


# ============================================================================
# MONGODB ROOM STORE
# ============================================================================
class MongoRoomStore:
    """
    Room store backed by a MongoDB collection via ``motor``.

    Collection schema (``rooms``)::

        {
            "_id": ObjectId,
            "roomId": str,           # unique index
            "messages": [{"sender": str, "content": str, "timestamp": datetime}, ...]
        }

    Driver errors and unreadable documents are re-raised as
    StoreUnavailableError so the API can
    answer 503 instead of an unshaped 500.
    """

    __slots__ = ("_collection",)

    def __init__(self, collection: motor.motor_asyncio.AsyncIOMotorCollection) -> None:
        self._collection = collection

    @classmethod
    def from_client(cls, client: motor.motor_asyncio.AsyncIOMotorClient) -> "MongoRoomStore":
        return cls(client[settings.MONGO_DB_NAME][settings.ROOMS_COLLECTION])

    async def ensure_indexes(self) -> None:
        """Create the unique roomId index that backs the one-room-per-id rule."""
        try:
            await self._collection.create_index("roomId", unique=True)
        except PyMongoError as e:
            logger.error(f"Index creation failed: {e}")
            raise StoreUnavailableError(message=str(e)) from e

    async def find_by_room_id(self, room_id: str) -> Optional[Room]:
        try:
            doc = await self._collection.find_one({"roomId": room_id})
        except PyMongoError as e:
            logger.error(f"Lookup of room '{room_id}' failed: {e}")
            raise StoreUnavailableError(room_id, str(e)) from e
        if doc is None:
            return None
        try:
            return Room.from_document(doc)
        except (KeyError, ValidationError) as e:
            logger.error(f"Stored room '{room_id}' is malformed: {e}")
            raise StoreUnavailableError(room_id, str(e)) from e

    async def save(self, room: Room) -> Room:
        doc = room.to_document()
        try:
            if room.id is None:
                result = await self._collection.insert_one(doc)
                return room.model_copy(update={"id": str(result.inserted_id)})

            await self._collection.replace_one({"_id": ObjectId(room.id)}, doc, upsert=True)
            return room
        except DuplicateKeyError as e:
            raise RoomConflictError(room.room_id) from e
        except (PyMongoError, InvalidId) as e:
            logger.error(f"Save of room '{room.room_id}' failed: {e}")
            raise StoreUnavailableError(room.room_id, str(e)) from e

    async def append_message(self, room_id: str, message: Message) -> bool:
        try:
            result = await self._collection.update_one(
                {"roomId": room_id},
                {"$push": {"messages": message.model_dump()}},
            )
        except PyMongoError as e:
            logger.error(f"Append to room '{room_id}' failed: {e}")
            raise StoreUnavailableError(room_id, str(e)) from e
        return result.matched_count > 0

    async def ping(self) -> None:
        try:
            await self._collection.database.command("ping")
        except PyMongoError as e:
            raise StoreUnavailableError(message=str(e)) from e
