# chat_backend/api/routes/root.py

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "message": "Chat Rooms Backend",
        "version": "1.0",
        "endpoints": {
            "rooms": "/api/v1/rooms",
            "room": "/api/v1/rooms/{roomId}",
            "messages": "/api/v1/rooms/{roomId}/messages",
            "health": "/health",
        },
    }
