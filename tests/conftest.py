from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from chat_backend.core import state
from chat_backend.main import app
from chat_backend.models.models import Message, Room
from chat_backend.services.memory_store import InMemoryRoomStore
from chat_backend.services.room_service import RoomService


def make_messages(count, sender="alice"):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        Message(sender=sender, content=f"m{i}", timestamp=base + timedelta(minutes=i))
        for i in range(count)
    ]


@pytest.fixture
def store():
    return InMemoryRoomStore()


@pytest.fixture
def service(store):
    return RoomService(store)


@pytest_asyncio.fixture
async def room_with_25_messages(store):
    """Room "busy" holding m0..m24, oldest first."""
    return await store.save(Room(room_id="busy", messages=make_messages(25)))


@pytest.fixture(autouse=True)
def wire_state(store, service):
    """Point the app at the in-memory store; ASGITransport skips startup events."""
    original = (state.room_store, state.room_service)
    state.room_store = store
    state.room_service = service
    try:
        yield
    finally:
        state.room_store, state.room_service = original


@pytest_asyncio.fixture
async def api_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
