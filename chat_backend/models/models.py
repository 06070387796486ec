# chat_backend/models/models.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    sender: str
    content: str
    timestamp: datetime = Field(default_factory=utcnow)


class Room(BaseModel):
    """
    A chat room and its full message history (oldest first).

    Stored as one document per room:
        {
            "_id": ObjectId("..."),
            "roomId": "general",
            "messages": [{"sender": "alice", "content": "hi", "timestamp": ...}]
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    room_id: str = Field(alias="roomId")
    messages: List[Message] = Field(default_factory=list)

    def to_document(self) -> Dict[str, Any]:
        """Document body for the store, without the store-assigned id."""
        return self.model_dump(by_alias=True, exclude={"id"})

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Room":
        return cls(
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
            room_id=doc["roomId"],
            messages=doc.get("messages", []),
        )


class CreateRoomRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_id: str = Field(alias="roomId")


class SendMessageRequest(BaseModel):
    content: str
    sender: str = "anonymous"
