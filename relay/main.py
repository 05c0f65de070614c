"""
FastAPI server for the Clover voice relay.

This module initializes and configures the FastAPI application that connects a
phone agent to the Clover payment platform. It exposes the Clover OAuth flow, a
webhook capture point, an order/checkout endpoint, and the Twilio voice webhook
together with the media stream WebSocket that Twilio opens back to this host.

HTTP requests pass through the access log and body limit middleware before being
routed. WebSocket upgrades all go through the stream router, which accepts only
the paths in its route table.
"""

from pathlib import Path

import dotenv
from fastapi import FastAPI, WebSocket

from relay.config.logging_config import configure_logging
from relay.config.settings import get_settings
from relay.handlers import (
    checkout_handlers,
    oauth_handlers,
    voice_handlers,
    webhook_handlers,
)
from relay.middleware import iso_timestamp, register_middleware
from relay.stream_router import StreamRouter

# Load environment variables from .env file if it exists
env_path = Path(".") / ".env"
if env_path.exists():
    dotenv.load_dotenv(env_path)

# Configure logging
logger = configure_logging()

# Read settings once so an invalid environment stops the server at import
settings = get_settings()

# Create FastAPI application
app = FastAPI(
    title="Clover Voice Relay",
    description="Relay between a phone AI agent, Twilio voice streams and the Clover payment platform",
    version="1.0.0",
)

register_middleware(app)

app.include_router(oauth_handlers.router)
app.include_router(webhook_handlers.router)
app.include_router(checkout_handlers.router)
app.include_router(voice_handlers.router)

# Create stream router
stream_router = StreamRouter()


@app.get("/health")
async def health_check():
    """Liveness endpoint for external health checks. Always succeeds."""
    return {"ok": True, "ts": iso_timestamp()}


@app.get("/")
async def root():
    """Root endpoint to display basic information about the API.

    Returns:
        dict: Basic information about the API and its endpoints.
    """
    return {
        "name": app.title,
        "description": app.description,
        "version": app.version,
        "endpoints": {
            "/health": "Health check endpoint",
            "/clover/oauth/start": "Redirect to Clover consent page",
            "/clover/oauth/callback": "Clover OAuth code exchange",
            "/clover/webhook": "Clover webhook capture",
            "/orders/checkout": "Create an order and hosted checkout link",
            "/voice/incoming": "Twilio voice webhook",
            "/voice/stream": "Twilio media stream WebSocket",
        },
    }


@app.websocket("/{path:path}")
async def websocket_endpoint(websocket: WebSocket):
    """Single dispatch point for every WebSocket upgrade, keyed on path."""
    await stream_router.dispatch(websocket)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, ws="websockets")
