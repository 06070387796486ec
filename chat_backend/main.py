# chat_backend/main.py

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chat_backend.core import state
from chat_backend.core.config import settings
from chat_backend.core.exceptions import RoomError
from chat_backend.core.logging import setup_logging, get_logger
from chat_backend.api.routes import root, health, rooms
from chat_backend.services.memory_store import InMemoryRoomStore
from chat_backend.services.mongo_store import MongoRoomStore, create_mongo_client
from chat_backend.services.room_service import RoomService

# Configure logging first
setup_logging()
logger = get_logger(__name__)

# FastAPI app
app = FastAPI(title="Chat Rooms Backend")

# CORS: one configured front-end origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# REST routes
app.include_router(root.router)
app.include_router(health.router)
app.include_router(rooms.router)


@app.exception_handler(RoomError)
async def room_error_handler(request: Request, exc: RoomError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.body)


@app.on_event("startup")
async def startup_event():
    logger.info(f"🚀 Application starting - room store: {settings.ROOM_STORE}")

    if settings.ROOM_STORE == "mongo":
        state.mongo_client = create_mongo_client()
        store = MongoRoomStore.from_client(state.mongo_client)
        await store.ensure_indexes()
    else:
        store = InMemoryRoomStore()

    # Store globally
    state.room_store = store
    state.room_service = RoomService(store)


@app.on_event("shutdown")
async def on_shutdown():
    if state.mongo_client is not None:
        state.mongo_client.close()
        state.mongo_client = None
        logger.info("MongoDB client closed")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("chat_backend.main:app", host="0.0.0.0", port=8080)
