"""
HTTP gateway middleware and body parsing.

Every request is logged before dispatch, and bodies larger than
``MAX_BODY_BYTES`` are refused with 413 before any handler runs. Handlers read
their bodies through ``parse_body`` which understands JSON and URL-encoded forms.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from relay.config.constants import (
    LOGGER_NAME,
    MAX_BODY_BYTES,
    RESPONSE_INVALID_JSON,
    RESPONSE_PAYLOAD_TOO_LARGE,
)

logger = logging.getLogger(LOGGER_NAME)


class RequestBodyError(Exception):
    """A request body that cannot be accepted (oversize or malformed)."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(reason)
        self.status_code = status_code
        self.reason = reason


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def parse_body(request: Request) -> Any:
    """
    Parse a request body according to its content type.

    JSON bodies are decoded, URL-encoded bodies become a dict of fields, and any
    other content type (or an empty body) yields an empty dict.

    Raises:
        RequestBodyError: 413 if the body exceeds the limit, 400 for invalid JSON
    """
    content_type = request.headers.get("content-type", "").lower()
    body = await request.body()
    if len(body) > MAX_BODY_BYTES:
        raise RequestBodyError(413, RESPONSE_PAYLOAD_TOO_LARGE)
    if not body:
        return {}

    if "json" in content_type:
        try:
            return json.loads(body)
        except ValueError as e:
            logger.warning(f"Invalid JSON body on {request.url.path}: {e}")
            raise RequestBodyError(400, RESPONSE_INVALID_JSON) from e

    if "application/x-www-form-urlencoded" in content_type:
        form = await request.form()
        return dict(form)

    return {}


async def request_body_error_handler(
    request: Request, exc: RequestBodyError
) -> PlainTextResponse:
    return PlainTextResponse(exc.reason, status_code=exc.status_code)


def register_middleware(app: FastAPI) -> None:
    """Install the body limit and access log middleware on ``app``."""

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > MAX_BODY_BYTES:
            logger.warning(
                f"Rejected {request.method} {request.url.path}: "
                f"body of {content_length} bytes exceeds {MAX_BODY_BYTES}"
            )
            return PlainTextResponse(RESPONSE_PAYLOAD_TOO_LARGE, status_code=413)
        return await call_next(request)

    # Added last so it runs first and sees every request
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info(f"{iso_timestamp()}  {request.method} {target}")
        return await call_next(request)

    app.add_exception_handler(RequestBodyError, request_body_error_handler)
