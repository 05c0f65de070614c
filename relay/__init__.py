"""
Clover Voice Relay - phone agent to Clover payments bridge

This application is a small integration relay used by a phone AI agent. It lets a
merchant connect their Clover account through OAuth, turns an order taken over
the phone into a Clover-hosted checkout link, captures Clover webhook deliveries,
and answers Twilio voice calls with a media stream pointed back at this server.

Architecture Overview:
- FastAPI server exposing the HTTP endpoints and the media stream WebSocket
- httpx-based client for the Clover token endpoint and REST API
- Twilio TwiML for the voice webhook
- No persistence: tokens and orders live in Clover or in an external store

Key Components:
- config: Constants, environment settings and logging setup
- handlers: HTTP route handlers and the media stream connection handler
- models: Pydantic models for checkout, OAuth and stream state
- services: Clover client and the order/checkout orchestration
- middleware: Access log, body limit and body parsing
- stream_router: Path-keyed dispatch of WebSocket upgrades

Getting Started:
1. Set up environment variables:
   - CLOVER_CLIENT_ID / CLOVER_CLIENT_SECRET: OAuth app credentials
   - CLOVER_TOKEN_URL: Clover token endpoint
   - CLOVER_API_BASE: Clover REST API base URL
   - CLOVER_REDIRECT_URL: Registered OAuth redirect URI
   - CLOVER_REDIRECT_AFTER_PAY: Where the checkout sends the payer (optional)
   - PORT: Port to run the server on (default 3000)

2. Start the server:
   ```bash
   python run.py
   ```

3. Point the Twilio number's voice webhook at https://your-host/voice/incoming
"""
