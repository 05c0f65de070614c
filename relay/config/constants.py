"""
Constants and configuration values used throughout the application.

This module defines constants that are used across different parts of the relay,
providing a centralized location for fixed protocol values, Clover defaults and
route paths so the handlers and their tests agree on them.
"""

# Logger name used throughout the application
LOGGER_NAME = "clover_relay"

# Request body limit (bytes)
MAX_BODY_BYTES = 2 * 1024 * 1024  # 2 MB

# Clover defaults
DEFAULT_AUTHORIZE_URL = "https://www.clover.com/oauth/authorize"
DEFAULT_REDIRECT_AFTER_PAY = "https://google.com"
DEFAULT_TENANT = "default"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
ORDER_TITLE = "Phone AI Order"
ORDER_STATE_OPEN = "OPEN"
CHECKOUT_CURRENCY = "USD"
TOKEN_PREVIEW_LENGTH = 8

# Server defaults
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

# Voice stream constants
VOICE_STREAM_PATH = "/voice/stream"
VOICE_STREAM_SCHEME = "wss"
VOICE_STREAM_TRACK = "both_tracks"

# Plain-text response bodies
RESPONSE_BAD_PAYLOAD = "Bad payload"
RESPONSE_CHECKOUT_ERROR = "Checkout error"
RESPONSE_MISSING_OAUTH_FIELDS = "Missing code or merchant_id"
RESPONSE_OAUTH_ERROR = "OAuth error"
RESPONSE_OAUTH_CONNECTED = "Clover connected. You can close this window."
RESPONSE_INVALID_JSON = "Invalid JSON body"
RESPONSE_PAYLOAD_TOO_LARGE = "Payload Too Large"
