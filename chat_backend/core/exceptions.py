# chat_backend/core/exceptions.py
from __future__ import annotations

from typing import Any


class RoomError(Exception):
    """
    Base class for errors surfaced to API callers.

    Each subclass knows the HTTP status and the JSON body it is rendered as
    by the exception handler registered in main.py.
    """

    status_code: int = 400
    body: Any = None

    def __init__(self, room_id: str | None = None, message: str | None = None):
        self.room_id = room_id
        super().__init__(message or str(self.body))


class RoomConflictError(RoomError):
    """A room with this identifier already exists."""

    body = "Room already exists"


class RoomNotFoundError(RoomError):
    """No room with this identifier exists."""

    body = "Room does not exist"


class InvalidRoomIdError(RoomError):
    body = "Room id required"


class InvalidPaginationError(RoomError):
    status_code = 422
    body = "page must be >= 0 and size must be >= 1"


class StoreUnavailableError(RoomError):
    """The document store failed or could not be reached."""

    status_code = 503
    body = "Room store unavailable"
