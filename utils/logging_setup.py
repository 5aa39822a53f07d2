#!/usr/bin/env python3
"""
Logging setup for the temperature server.

Logs go to a single appending file. stdout carries the MCP stdio protocol,
so the optional console mirror writes to stderr only.
"""

import logging
import re
import sys

from config import Config
from utils.errors import LoggingSetupError

TOOL_LOGGER_NAME = "temperature.tools"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_APPID_RE = re.compile(r"(appid=)[^&#]+")


def setup_logging(log_dir=None, level=None, console=True) -> logging.Logger:
    """
    Create the log directory and file sink, returning the tool logger.

    Raises LoggingSetupError if the level name is unknown or the directory
    or file cannot be created.
    """
    level_name = str(level or Config.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise LoggingSetupError(f"Invalid log level: {level or Config.LOG_LEVEL}")

    log_file = Config.get_log_file(log_dir)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LoggingSetupError(f"Failed to create log directory: {e}") from e
    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        raise LoggingSetupError(f"Failed to open log file: {e}") from e

    detailed_formatter = logging.Formatter(LOG_FORMAT)
    file_handler.setFormatter(detailed_formatter)
    handlers = [file_handler]
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(detailed_formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=level_name, handlers=handlers, force=True)
    # httpx logs full request URLs at INFO, which would include the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    tool_logger = logging.getLogger(TOOL_LOGGER_NAME)
    tool_logger.setLevel(level_name)
    return tool_logger


def redact_api_key(url: str) -> str:
    """Mask the appid query value so the key never reaches the log."""
    return _APPID_RE.sub(r"\1***", url)
