"""
WebSocket upgrade dispatch for the Clover relay.

Every WebSocket upgrade request arrives at a single dispatch point which looks
the request path up in a route table. A known path hands the connection to its
handler; any other path is closed before the handshake completes, so the peer
never gets an open WebSocket or any payload.
"""

import logging
from typing import Awaitable, Callable, Dict

from fastapi import WebSocket

from relay.config.constants import LOGGER_NAME, VOICE_STREAM_PATH
from relay.handlers.stream_handlers import handle_media_stream

logger = logging.getLogger(LOGGER_NAME)

# Type hint for connection handler functions
StreamHandler = Callable[[WebSocket], Awaitable[object]]


class StreamRouter:
    """Maps WebSocket paths to connection handlers.

    The default table routes the voice stream path to the media stream handler.
    More streaming paths can be added with ``add_route`` without touching the
    dispatch logic.
    """

    def __init__(self):
        self.routes: Dict[str, StreamHandler] = {
            VOICE_STREAM_PATH: handle_media_stream,
        }

    def add_route(self, path: str, handler: StreamHandler) -> None:
        """Register ``handler`` for upgrades on ``path``."""
        if path in self.routes:
            raise ValueError(f"Stream route already registered: {path}")
        self.routes[path] = handler

    async def dispatch(self, websocket: WebSocket) -> None:
        """Route an upgrade request by path, or drop it if the path is unknown.

        Args:
            websocket (WebSocket): The not-yet-accepted FastAPI WebSocket
        """
        path = websocket.url.path
        handler = self.routes.get(path)
        if handler is None:
            logger.warning(f"Rejecting WebSocket upgrade for unknown path: {path}")
            await websocket.close()
            return

        await handler(websocket)
