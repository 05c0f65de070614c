"""
Handlers module for the Clover relay's HTTP and WebSocket endpoints.

Key components:
- oauth_handlers: Clover OAuth start redirect and code-exchange callback.
- checkout_handlers: Public endpoint turning an order request into a hosted
  Clover checkout link.
- webhook_handlers: Capture point that logs Clover webhook deliveries.
- voice_handlers: Twilio voice webhook answering with media-stream TwiML.
- stream_handlers: The media stream connection handler, which receives and
  discards frames.

Usage examples:
```python
from fastapi import FastAPI

from relay.handlers import checkout_handlers, oauth_handlers

app = FastAPI()
app.include_router(oauth_handlers.router)
app.include_router(checkout_handlers.router)
```
"""

# Handlers module initialization
