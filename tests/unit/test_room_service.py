import pytest

from chat_backend.core.exceptions import (
    InvalidPaginationError,
    InvalidRoomIdError,
    RoomConflictError,
    RoomNotFoundError,
)
from chat_backend.models.models import Message


@pytest.mark.asyncio
async def test_create_then_join_returns_empty_room(service):
    created = await service.create_room("general")
    assert created.room_id == "general"
    assert created.messages == []
    # the pre-save object is returned, so no store id yet
    assert created.id is None

    joined = await service.join_room("general")
    assert joined.room_id == "general"
    assert joined.messages == []
    assert joined.id is not None


@pytest.mark.asyncio
async def test_create_existing_room_conflicts_and_keeps_messages(service, room_with_25_messages):
    with pytest.raises(RoomConflictError):
        await service.create_room("busy")

    room = await service.join_room("busy")
    assert [m.content for m in room.messages] == [f"m{i}" for i in range(25)]


@pytest.mark.asyncio
@pytest.mark.parametrize("room_id", ["", "   "])
async def test_create_blank_room_id_rejected(service, store, room_id):
    with pytest.raises(InvalidRoomIdError):
        await service.create_room(room_id)
    assert store.rooms == {}


@pytest.mark.asyncio
async def test_join_missing_room(service):
    with pytest.raises(RoomNotFoundError):
        await service.join_room("nowhere")


@pytest.mark.asyncio
async def test_join_is_idempotent(service, room_with_25_messages):
    first = await service.join_room("busy")
    second = await service.join_room("busy")
    assert first == second


@pytest.mark.asyncio
async def test_get_messages_pages_from_the_end(service, room_with_25_messages):
    page0 = await service.get_messages("busy", page=0, size=20)
    page1 = await service.get_messages("busy", page=1, size=20)
    page2 = await service.get_messages("busy", page=2, size=20)

    assert [m.content for m in page0] == [f"m{i}" for i in range(5, 25)]
    assert [m.content for m in page1] == [f"m{i}" for i in range(5)]
    assert page2 == []


@pytest.mark.asyncio
async def test_get_messages_defaults_to_first_page_of_twenty(service, room_with_25_messages):
    messages = await service.get_messages("busy")
    assert len(messages) == 20
    assert messages[-1].content == "m24"


@pytest.mark.asyncio
async def test_get_messages_missing_room(service):
    with pytest.raises(RoomNotFoundError):
        await service.get_messages("nowhere", page=0, size=20)


@pytest.mark.asyncio
async def test_get_messages_invalid_paging_checked_before_lookup(service):
    with pytest.raises(InvalidPaginationError):
        await service.get_messages("nowhere", page=-1, size=20)
    with pytest.raises(InvalidPaginationError):
        await service.get_messages("nowhere", page=0, size=0)


@pytest.mark.asyncio
async def test_send_message_appends_to_history(service):
    await service.create_room("general")

    sent = await service.send_message("general", "bob", "hello")
    assert isinstance(sent, Message)
    assert sent.timestamp.tzinfo is not None

    page = await service.get_messages("general", page=0, size=20)
    assert [(m.sender, m.content) for m in page] == [("bob", "hello")]


@pytest.mark.asyncio
async def test_send_message_to_missing_room(service):
    with pytest.raises(RoomNotFoundError):
        await service.send_message("nowhere", "bob", "hello")


@pytest.mark.asyncio
async def test_create_room_lost_race_is_conflict(service, store, monkeypatch):
    # lookup misses, but another writer inserted the room before our save
    async def taken(room):
        raise RoomConflictError(room.room_id)

    monkeypatch.setattr(store, "save", taken)

    with pytest.raises(RoomConflictError):
        await service.create_room("general")
