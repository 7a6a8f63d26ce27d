"""
Realtime connection registry.

Owns the set of live WebSocket connections and fans frames out to them.
Mutation and iteration both happen on the event loop, so no lock is taken.

Dependencies: fastapi (WebSocket)
System role: Transient connection state for the broadcast server
"""

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Registry of connected realtime clients."""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, websocket: object) -> bool:
        return websocket in self._connections

    async def connect(self, websocket: WebSocket) -> None:
        """
        Accept the transport connection and start tracking it.

        Args:
            websocket: Incoming WebSocket connection
        """
        await websocket.accept()
        self._connections.add(websocket)
        logger.info(
            "WebSocket client connected",
            extra={"client_host": str(websocket.client), "connections": len(self._connections)},
        )

    def disconnect(self, websocket: WebSocket) -> None:
        """Stop tracking a connection. Unknown sockets are ignored."""
        self._connections.discard(websocket)
        logger.info(
            "WebSocket client disconnected",
            extra={"connections": len(self._connections)},
        )

    async def send(self, websocket: WebSocket, frame: dict[str, Any]) -> None:
        """Send one JSON frame to a single client."""
        await websocket.send_json(frame)

    async def broadcast(
        self,
        frame: dict[str, Any],
        exclude: WebSocket | None = None,
    ) -> int:
        """
        Send a JSON frame to every connected client.

        Iterates over a snapshot so sockets that drop mid-broadcast do not
        disturb the loop. A socket whose send fails is removed and the
        broadcast continues.

        Args:
            frame: JSON-serializable outbound frame
            exclude: Optional connection that must not receive the frame

        Returns:
            int: Number of clients the frame was delivered to
        """
        delivered = 0
        for connection in list(self._connections):
            if connection is exclude:
                continue
            try:
                await connection.send_json(frame)
                delivered += 1
            except Exception as e:
                logger.warning(
                    "Dropping connection after failed send",
                    extra={"error_type": type(e).__name__, "error_msg": str(e)},
                )
                self._connections.discard(connection)
        return delivered
