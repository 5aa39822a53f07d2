#!/usr/bin/env python3
"""
MCP Temperature Server (stdio transport).

Exposes a single get_temperature tool that proxies to an HTTP temperature
service:
- Configuration centralized in config.py
- Utilities in utils/ package
- Tools in tools/ package

ENV:
  WEATHER_API_KEY          -> API key forwarded to the temperature service
  TEMPERATURE_SERVICE_URL  -> backend endpoint (default http://localhost:8080/temperature)
  LOG_DIR / LOG_LEVEL      -> log file location and verbosity
"""

import argparse
import asyncio
import logging
import sys

from mcp.server.fastmcp import FastMCP

from config import Config
from tools.tool_registry import register_all_tools
from utils.errors import LoggingSetupError
from utils.http_client import close_http_client
from utils.logging_setup import setup_logging


def build_app(logger=None, http_client=None) -> FastMCP:
    """Create the FastMCP app with every tool registered."""
    app = FastMCP(Config.SERVER_NAME)
    register_all_tools(app, logger=logger, http_client=http_client)
    return app


async def run_server(app: FastMCP):
    """Serve the app over stdio until the client disconnects."""
    logging.info(f"{Config.SERVER_NAME} v{Config.SERVER_VERSION} starting on stdio")
    logging.info(f"Temperature service: {Config.TEMPERATURE_SERVICE_URL}")
    if not Config.has_weather_api_key():
        logging.warning(f"{Config.WEATHER_API_KEY_ENV} is not set")

    try:
        logging.info("Server running")
        await app.run_stdio_async()
    except KeyboardInterrupt:
        logging.info("Server shutting down...")
    finally:
        await close_http_client()
        logging.info("Server stopped")


def main(argv=None):
    parser = argparse.ArgumentParser(description="MCP Temperature Server")
    parser.add_argument("--log-dir", help=f"Log directory (default: {Config.LOG_DIR})")
    parser.add_argument(
        "--log-level", default=Config.LOG_LEVEL, help="Log level (default: %(default)s)"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Log to the file only, not stderr"
    )
    args = parser.parse_args(argv)

    try:
        logger = setup_logging(args.log_dir, args.log_level, console=not args.quiet)
    except LoggingSetupError as e:
        print(f"[init] {e}", file=sys.stderr)
        sys.exit(1)

    logging.info(f"Logs: {Config.get_log_file(args.log_dir)}")
    app = build_app(logger=logger)
    try:
        asyncio.run(run_server(app))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
