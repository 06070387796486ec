# chat_backend/api/routes/health.py

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from chat_backend.core import state
from chat_backend.core.config import settings
from chat_backend.core.exceptions import StoreUnavailableError

router = APIRouter()

@router.get("/health")
async def health():
    """
    Health check endpoint.

    Pings the room store. Used by container health probes and monitoring.

    Returns:
        dict: Status and store backend; 503 if the store is unreachable
    """
    try:
        await state.room_store.ping()
    except StoreUnavailableError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "store": settings.ROOM_STORE},
        )

    return {"status": "healthy", "store": settings.ROOM_STORE}
