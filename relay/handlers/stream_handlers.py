"""
Handles the Twilio media stream WebSocket.

The connection is accepted, every inbound frame (text or binary) is counted and
discarded, and the close is logged. No frame is ever sent back; forwarding audio
to a speech backend is not implemented.
"""

import logging

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from relay.config.constants import LOGGER_NAME
from relay.models.media_stream import MediaStream

logger = logging.getLogger(LOGGER_NAME)


async def handle_media_stream(websocket: WebSocket) -> MediaStream:
    """
    Run one voice stream connection until the peer disconnects.

    Args:
        websocket: The WebSocket opened by Twilio

    Returns:
        The final state of the stream, for inspection by callers and tests
    """
    await websocket.accept()
    client = f"{websocket.client.host}:{websocket.client.port}" if websocket.client else None
    stream = MediaStream(client=client)
    logger.info(f"Voice stream connected{f' from {client}' if client else ''}")

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            stream.record_frame(message)
    except Exception as e:
        logger.error(f"Error in voice stream: {e}", exc_info=True)
        if websocket.application_state == WebSocketState.CONNECTED:
            await websocket.close()
    finally:
        stream.close()
        logger.info(f"Voice stream closed after {stream.frames_received} frames")

    return stream
