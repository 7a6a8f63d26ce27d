"""
Realtime broadcast endpoint.

One WebSocket endpoint shared by every client; no per-session channels.

Client sends:
    {"type": "message", "sessionId": "...", "payload": {"role": "user", "content": "..."}}
    {"type": "typing", "sessionId": "...", "payload": {"isTyping": true}}

Server sends:
    {"type": "message", "payload": {<stored message>}, "sessionId": "..."}   (all clients)
    {"type": "typing", "payload": {"isTyping": true}, "sessionId": "..."}   (all but sender)
    {"error": "..."}                                                         (sender only)

Dependencies: fastapi, portal_messaging.application.services.realtime_service
System role: WebSocket broadcast API
"""

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from portal_messaging.api.deps import get_realtime_service
from portal_messaging.application.services import RealtimeService

logger = logging.getLogger(__name__)


async def realtime_endpoint(
    websocket: WebSocket,
    service: RealtimeService = Depends(get_realtime_service),
) -> None:
    """
    Serve one client until it disconnects.

    Frames are handled one at a time in arrival order. Text and binary
    frames are both decoded as UTF-8 JSON.

    Args:
        websocket: WebSocket connection
        service: Injected RealtimeService
    """
    await service.manager.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logger.debug("Client closed connection", extra={"code": message.get("code")})
                break

            raw = message.get("text")
            if raw is None:
                raw = (message.get("bytes") or b"").decode("utf-8", errors="replace")

            await service.handle_frame(websocket, raw)
    except WebSocketDisconnect as e:
        logger.debug("Client went away mid-send", extra={"code": e.code})
    finally:
        service.manager.disconnect(websocket)


def create_realtime_router(path: str = "/ws") -> APIRouter:
    """
    Build the router exposing the broadcast endpoint.

    Args:
        path: WebSocket mount path

    Returns:
        APIRouter: Router with a single WebSocket route
    """
    router = APIRouter(tags=["realtime"])
    router.add_api_websocket_route(path, realtime_endpoint)
    return router
