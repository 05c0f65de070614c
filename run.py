"""
Run script for starting the Clover Voice Relay server.

Usage:
    python run.py [--port PORT] [--host HOST] [--log-level LEVEL]
"""

import argparse
import os
import sys
from pathlib import Path

import dotenv
import uvicorn
from pydantic import ValidationError

sys.path.append(str(Path(__file__).parent))

from relay.config.constants import DEFAULT_HOST, DEFAULT_PORT
from relay.config.logging_config import configure_logging
from relay.config.settings import get_settings


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Start the Clover Voice Relay server"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT") or DEFAULT_PORT),
        help="Port to run the server on (default: 3000 or PORT env var)",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST") or DEFAULT_HOST,
        help="Host to bind the server to (default: 0.0.0.0 or HOST env var)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO or LOG_LEVEL env var)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for starting the server."""
    dotenv.load_dotenv()
    args = parse_args(argv)
    logger = configure_logging(args.log_level)

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid environment configuration: {e}")
        print("Error: invalid environment configuration, see the log for details")
        sys.exit(1)

    missing = settings.missing_clover_settings()
    if missing:
        logger.warning(f"Clover settings not configured: {', '.join(missing)}")

    logger.info(f"Starting server on http://{args.host}:{args.port}")
    logger.info(f"Log level: {args.log_level}")

    uvicorn.run(
        "relay.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        http="h11",
        ws="websockets",
        # Our own middleware logs every request
        access_log=False,
        reload=os.getenv("ENV", "production").lower() == "development",
    )


if __name__ == "__main__":
    main()
