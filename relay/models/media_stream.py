"""
Per-connection state for a Twilio media stream.

A stream moves through ``connected -> receiving -> closed``. Frames are counted
and dropped; nothing is buffered or forwarded.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class StreamState(str, Enum):
    CONNECTED = "connected"
    RECEIVING = "receiving"
    CLOSED = "closed"


class MediaStream(BaseModel):
    """Lifecycle and frame counters of one voice stream connection."""

    client: Optional[str] = None
    state: StreamState = StreamState.CONNECTED
    text_frames: int = 0
    binary_frames: int = 0

    @property
    def frames_received(self) -> int:
        return self.text_frames + self.binary_frames

    def record_frame(self, message: Dict[str, Any]) -> None:
        """
        Account for one inbound ASGI ``websocket.receive`` message.

        Raises:
            RuntimeError: If the stream has already been closed
        """
        if self.state == StreamState.CLOSED:
            raise RuntimeError("Cannot receive frames on a closed stream")
        if message.get("bytes") is not None:
            self.binary_frames += 1
        else:
            self.text_frames += 1
        self.state = StreamState.RECEIVING

    def close(self) -> None:
        self.state = StreamState.CLOSED
