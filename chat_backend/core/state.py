# chat_backend/core/state.py
from __future__ import annotations

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from chat_backend.services.room_service import RoomService
from chat_backend.services.room_store import RoomStore

# Global singletons for app state, wired up on startup (see main.py)
mongo_client: Optional[AsyncIOMotorClient] = None
room_store: Optional[RoomStore] = None
room_service: Optional[RoomService] = None
