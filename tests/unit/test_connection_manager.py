from unittest.mock import AsyncMock

import pytest

from portal_messaging.core.connection_manager import ConnectionManager


def make_socket(fail: bool = False) -> AsyncMock:
    websocket = AsyncMock()
    if fail:
        websocket.send_json.side_effect = RuntimeError("socket closed")
    return websocket


@pytest.fixture
def manager() -> ConnectionManager:
    return ConnectionManager()


class TestConnect:
    @pytest.mark.asyncio
    async def test_connect_accepts_and_tracks(self, manager) -> None:
        websocket = make_socket()

        await manager.connect(websocket)

        websocket.accept.assert_awaited_once()
        assert websocket in manager
        assert len(manager) == 1

    @pytest.mark.asyncio
    async def test_disconnect_is_idempotent(self, manager) -> None:
        websocket = make_socket()
        await manager.connect(websocket)

        manager.disconnect(websocket)
        manager.disconnect(websocket)

        assert websocket not in manager
        assert len(manager) == 0


class TestBroadcast:
    @pytest.mark.asyncio
    async def test_broadcast_reaches_all(self, manager) -> None:
        sockets = [make_socket() for _ in range(3)]
        for websocket in sockets:
            await manager.connect(websocket)

        delivered = await manager.broadcast({"type": "message"})

        assert delivered == 3
        for websocket in sockets:
            websocket.send_json.assert_awaited_once_with({"type": "message"})

    @pytest.mark.asyncio
    async def test_broadcast_skips_excluded(self, manager) -> None:
        sender, other = make_socket(), make_socket()
        await manager.connect(sender)
        await manager.connect(other)

        delivered = await manager.broadcast({"type": "typing"}, exclude=sender)

        assert delivered == 1
        sender.send_json.assert_not_awaited()
        other.send_json.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_send_drops_connection_and_continues(self, manager) -> None:
        broken, healthy = make_socket(fail=True), make_socket()
        await manager.connect(broken)
        await manager.connect(healthy)

        delivered = await manager.broadcast({"type": "message"})

        assert delivered == 1
        healthy.send_json.assert_awaited_once()
        assert broken not in manager
        assert healthy in manager

    @pytest.mark.asyncio
    async def test_broadcast_with_no_clients(self, manager) -> None:
        assert await manager.broadcast({"type": "message"}) == 0

    @pytest.mark.asyncio
    async def test_send_targets_one_client(self, manager) -> None:
        first, second = make_socket(), make_socket()
        await manager.connect(first)
        await manager.connect(second)

        await manager.send(first, {"error": "nope"})

        first.send_json.assert_awaited_once_with({"error": "nope"})
        second.send_json.assert_not_awaited()
