"""Capture point for Clover webhook deliveries."""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from relay.config.constants import LOGGER_NAME
from relay.middleware import parse_body

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(tags=["webhooks"])


@router.post("/clover/webhook")
async def clover_webhook(request: Request):
    """Log the payload verbatim and acknowledge. No verification or dispatch."""
    payload = await parse_body(request)
    logger.info(f"Clover webhook payload: {json.dumps(payload, ensure_ascii=False)}")
    return PlainTextResponse("OK")
