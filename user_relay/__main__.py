"""
Command-line entry point.

    python -m user_relay [--host HOST] [--port PORT] [--log-level LEVEL]

Defaults come from the environment (PORT, HOST, LOG_LEVEL).
"""

import argparse
import logging

import uvicorn

from user_relay.core.config import settings

logger = logging.getLogger("user_relay")


def main() -> None:
    parser = argparse.ArgumentParser(description="User Relay HTTP server")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument(
        "--port", type=int, default=settings.port, help="Listening port (env: PORT)"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING, ERROR"
    )
    args = parser.parse_args()

    settings.log_level = args.log_level

    from user_relay.main import app

    logger.info("Listening on port %d", args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
