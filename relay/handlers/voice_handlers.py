"""
Twilio voice webhook.

Answers an inbound call with TwiML that tells Twilio to open a bidirectional
media stream back to this host on the voice stream path.
"""

import logging

from fastapi import APIRouter, Request, Response
from twilio.twiml.voice_response import Connect, VoiceResponse

from relay.config.constants import (
    LOGGER_NAME,
    VOICE_STREAM_PATH,
    VOICE_STREAM_SCHEME,
    VOICE_STREAM_TRACK,
)
from relay.middleware import parse_body

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/voice", tags=["voice"])


def build_stream_twiml(hostname: str) -> str:
    """Render the ``<Connect><Stream>`` TwiML for the given public hostname."""
    response = VoiceResponse()
    connect = Connect()
    connect.stream(
        url=f"{VOICE_STREAM_SCHEME}://{hostname}{VOICE_STREAM_PATH}",
        track=VOICE_STREAM_TRACK,
    )
    response.append(connect)
    return str(response)


@router.post("/incoming")
async def voice_incoming(request: Request):
    form = await parse_body(request)
    if isinstance(form, dict) and form.get("CallSid"):
        logger.info(f"Incoming call {form.get('CallSid')} from {form.get('From', 'unknown')}")

    twiml = build_stream_twiml(request.url.hostname or "localhost")
    return Response(content=twiml, media_type="text/xml")
